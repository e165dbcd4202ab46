"""
Lunchly - Restaurant Reservation Manager
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, render_template, g
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import csrf

# Import database functions
from database import close_db, init_db

from models.errors import ValidationError


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)
    register_context_processors(app)
    register_teardown_handlers(app)
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.customers import customers_bp

    # Customer pages live at the site root
    app.register_blueprint(customers_bp)


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(400)
    def bad_request_error(error):
        """Handle 400 errors."""
        return render_template('errors/400.html', error=error, errors={}), 400

    @app.errorhandler(ValidationError)
    def validation_error(error):
        """Handle invalid customer or reservation data."""
        app.logger.info(f'Rejected invalid submission: {error}')
        return render_template('errors/400.html', error=error, errors=error.errors), 400

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return render_template('errors/404.html', error=error), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        return render_template('errors/500.html'), 500


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    @click.option('--sample-data', is_flag=True, help='Load sample customers and reservations.')
    def init_db_command(sample_data):
        """Recreate the database schema."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db(seed=sample_data)
        click.echo('Database initialized successfully!')


def register_context_processors(app):
    """Register template context processors."""

    @app.context_processor
    def utility_processor():
        """Inject application metadata into templates."""
        from datetime import datetime

        return {
            'current_year': datetime.now().year,
            'app_name': app.config.get('APP_NAME', 'Lunchly'),
            'app_version': app.config.get('APP_VERSION', '1.0.0')
        }

    @app.template_filter('datetime_local')
    def datetime_local_filter(value):
        """Format a datetime for an HTML datetime-local input."""
        from utils.helpers import format_datetime_local
        return format_datetime_local(value)


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/lunchly.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Lunchly startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
