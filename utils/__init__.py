"""
Utils Package - Centralized utility modules initialization
"""

from .data import ProjectCard, load_data, get_global_meta
from .effects import Particle, generate_confetti, CONFETTI_COUNT, CONFETTI_PALETTE
from .scroll import ScrollVisibility, next_state, client_config, SHOWN, HIDDEN
from .helpers import css_number, css_seconds, mailto
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class
)

__all__ = [
    # Data
    'ProjectCard',
    'load_data',
    'get_global_meta',

    # Effects
    'Particle',
    'generate_confetti',
    'CONFETTI_COUNT',
    'CONFETTI_PALETTE',

    # Scroll
    'ScrollVisibility',
    'next_state',
    'client_config',
    'SHOWN',
    'HIDDEN',

    # Helpers
    'css_number',
    'css_seconds',
    'mailto',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
