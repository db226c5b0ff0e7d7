"""
Command line entry point for the annual report

    annual-report serve [--host HOST] [--port PORT] [--debug]
    annual-report export --out DIR
    annual-report remote entities|entity SLUG|totals
"""
import argparse
import json
import logging
import shutil
import sys
from pathlib import Path

from flask import Config

from .config.settings import PACKAGE_DIR, ReportConfig
from .components import registry
from .core import RemoteDataClient, RemoteConfigError, ReportDataError
from .report_app import ReportApp

logger = logging.getLogger(__name__)


def _output_file(out_dir, path):
    """Map a page path to its index.html file under out_dir"""
    relative = path.strip('/')
    return out_dir / relative / 'index.html' if relative else out_dir / 'index.html'


def export_site(app, out_dir):
    """
    Render every static page to HTML files

    Args:
        app: Configured Flask application
        out_dir: Directory to write into (created if missing)

    Returns:
        List of page paths written
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = registry.static_paths()
    written = []
    with app.test_client() as client:
        for path in paths:
            response = client.get(path)
            if response.status_code != 200:
                raise RuntimeError(f'Rendering {path} returned HTTP {response.status_code}')
            target = _output_file(out_dir, path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(response.data)
            logger.info('Wrote %s', target)
            written.append(path)

    shutil.copytree(app.static_folder, out_dir / 'static', dirs_exist_ok=True)
    logger.info('Exported %d pages to %s', len(written), out_dir)
    return written


def cmd_serve(args):
    report = ReportApp()
    report.create_app()
    report.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def cmd_export(args):
    app = ReportApp().create_app()
    export_site(app, args.out)
    return 0


def cmd_remote(args):
    config = Config(str(PACKAGE_DIR))
    config.from_object(ReportConfig)
    client = RemoteDataClient.from_config(config)
    if args.what == 'entities':
        result = client.get_entities()
    elif args.what == 'entity':
        if not args.slug:
            logger.error('remote entity needs a slug')
            return 2
        result = client.get_entity_detail(args.slug)
    else:
        result = client.get_ecosystem_totals()
    print(json.dumps(result, indent=2))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog='annual-report', description='BHC annual report site')
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the report server')
    serve.add_argument('--host', default=None)
    serve.add_argument('--port', type=int, default=None)
    serve.add_argument('--debug', action='store_true')
    serve.set_defaults(func=cmd_serve)

    export = subparsers.add_parser('export', help='Render every page to static HTML')
    export.add_argument('--out', required=True, help='Output directory')
    export.set_defaults(func=cmd_export)

    remote = subparsers.add_parser('remote', help='Query the hosted backend')
    remote.add_argument('what', choices=['entities', 'entity', 'totals'])
    remote.add_argument('slug', nargs='?')
    remote.set_defaults(func=cmd_remote)

    return parser


def main(argv=None):
    """Main entry point"""
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ReportDataError as e:
        logger.error('Report data error: %s', e)
        return 1
    except RemoteConfigError as e:
        logger.error('%s (set SUPABASE_URL and SUPABASE_ANON_KEY)', e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
