"""
UI Helper Functions for Blueprint-Specific Styling
===================================================

Each blueprint can ship its own CSS/JS files. The context processor asks this
module which assets belong to the active blueprint and the base template links
them.

To add assets for a blueprint:
1. Put the files under static/css or static/js
2. List them in the maps below
"""

from flask import request
from typing import List, Dict, Optional


BLUEPRINT_CSS_MAP = {
    'pages': [
        'css/portfolio.css',
    ],
}

# Pages outside any blueprint (404, 500)
DEFAULT_CSS = [
    'css/portfolio.css',
]

BLUEPRINT_JS_MAP = {
    'pages': [
        'js/portfolio.js',
    ],
}


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    Get the CSS files of a blueprint

    Args:
        blueprint_name: Blueprint name (e.g. 'pages')

    Returns:
        list: Paths relative to the static folder, DEFAULT_CSS when
        no blueprint handles the request

    Example:
        >>> get_blueprint_styles('pages')
        ['css/portfolio.css']
    """
    if not blueprint_name:
        return list(DEFAULT_CSS)
    return list(BLUEPRINT_CSS_MAP.get(blueprint_name, []))


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """
    Get the JavaScript files of a blueprint

    Example:
        >>> get_blueprint_scripts('pages')
        ['js/portfolio.js']
    """
    if not blueprint_name:
        return []
    return list(BLUEPRINT_JS_MAP.get(blueprint_name, []))


def inject_blueprint_assets() -> Dict[str, List[str]]:
    """
    Assets of the blueprint handling the current request

    Returns:
        dict: blueprint_styles, blueprint_scripts and current_blueprint
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the body of a page

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
