"""
BHC Annual Report
Component-based Flask application serving the report pages
"""
import logging

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config.settings import ReportConfig
from .core import init_report_data, get_report_data
from .routes.main_routes import main_bp

# Import page components
from .components.home import init_home
from .components.entities import init_entities
from .components.financials import init_financials
from .components.compare import init_compare
from .components.flywheel import init_flywheel
from .components.team import init_team
from .components.goals import init_goals
from .components.investors import init_investors
from .components.print_report import init_print_report

logger = logging.getLogger(__name__)


def build_footer_groups(groups, entities):
    """Footer columns with the entities whose category falls under each"""
    columns = []
    for group in groups:
        members = [
            {'name': e['name'], 'href': f"/entity/{e['slug']}"}
            for e in entities if e.get('category') in group['categories']
        ]
        columns.append({'title': group['title'], 'entities': members})
    return columns


class ReportApp:
    """Main report application class"""

    def __init__(self, config_object=ReportConfig):
        self.config_object = config_object
        self.app = None

    def create_app(self):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(self.config_object)

        # Initialize extensions
        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )

        # Load every dataset up front so bad data fails at startup
        store = init_report_data(self.app.config['DATA_DIR'])

        # Initialize components
        init_home(self.app)
        init_entities(self.app)
        init_financials(self.app)
        init_compare(self.app)
        init_flywheel(self.app)
        init_team(self.app)
        init_goals(self.app)
        init_investors(self.app)
        init_print_report(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        footer_groups = build_footer_groups(self.app.config['FOOTER_GROUPS'], store.entities())

        @self.app.context_processor
        def inject_layout():
            config = self.app.config
            return {
                'site_name': config['SITE_NAME'],
                'report_title': config['REPORT_TITLE'],
                'report_year': config['REPORT_YEAR'],
                'contact_email': config['CONTACT_EMAIL'],
                'nav_links': config['NAV_LINKS'],
                'footer_groups': footer_groups,
            }

        return self.app

    def run(self, host=None, port=None, debug=False):
        """Start the report server"""
        host = host or self.app.config['HOST']
        port = port or self.app.config['PORT']

        logger.info('%s', self.app.config['REPORT_TITLE'])
        logger.info('Starting on: http://localhost:%s', port)
        logger.info('Serving %d entities from %s',
                    len(get_report_data().entities()), self.app.config['DATA_DIR'])

        self.app.run(host=host, port=port, debug=debug)


def create_app(config_object=ReportConfig):
    """Build a configured report application"""
    return ReportApp(config_object).create_app()


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO)
    report = ReportApp()
    report.create_app()
    report.run()


if __name__ == '__main__':
    main()
