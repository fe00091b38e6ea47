"""
Pages Routes - The portfolio page
"""

from flask import render_template, current_app
from utils.data import load_data
from utils.effects import generate_confetti
from utils.scroll import client_config
from . import pages_bp


@pages_bp.route('/')
def index():
    """Portfolio page - a fresh confetti batch on every render"""
    data = load_data()
    confetti = generate_confetti()
    current_app.logger.debug(f"Rendering portfolio with {len(confetti)} confetti pieces")

    return render_template('index.html',
                           data=data,
                           confetti=confetti,
                           scroll=client_config())
