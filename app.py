"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration, Jinja
filters, blueprints, error handlers and response hooks. The page itself is
served by the pages blueprint.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request
from config import get_config
from utils.data import get_global_meta

# Import all blueprints
from blueprints.pages import pages_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Register Jinja filters
    register_filters(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio is running'}, 200

    return app


def register_filters(app):
    """Register Jinja filters used by the page template"""
    from utils.helpers import css_number, css_seconds, mailto

    app.jinja_env.filters['css_number'] = css_number
    app.jinja_env.filters['css_seconds'] = css_seconds
    app.jinja_env.filters['mailto'] = mailto
    app.logger.info('✓ Registered Jinja filters: css_number, css_seconds, mailto')


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.logger.info(f'✓ Registered blueprints: {", ".join(app.blueprints)}')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values shared by every template"""
        from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

        # Get Blueprint-specific assets
        blueprint_assets = inject_blueprint_assets()

        # Get page-specific CSS class
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'current_year': datetime.now().year,
            'default_meta': get_global_meta(),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        # connect-src and form-action are closed: nothing on the page talks back to a server
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data:; "
            "connect-src 'none'; "
            "form-action 'none'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
