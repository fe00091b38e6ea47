"""
Pages Blueprint - Public portfolio page
Handles: Hero, projects, skills, education, contact
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
