import logging
import argparse
import sys
from typing import Any, Dict, List

import yaml

from core.config_loader import load_config
from database.database import db_session_scope
from database.init_db import init_db
from database.repositories import CompanyRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

HIRING_BAR_FIELDS = {
    'technical': 'hiring_bar_technical',
    'behavioral': 'hiring_bar_behavioral',
    'system_design': 'hiring_bar_system_design',
    'overall': 'hiring_bar_overall',
}

PROFILE_FIELDS = (
    'logo',
    'acceptance_rate',
    'difficulty_rating',
    'focus_areas',
    'interview_style',
    'common_topics',
)


def load_company_profiles(path: str) -> List[Dict[str, Any]]:
    """Read company profiles from a YAML file with a top-level `companies` list."""
    logger.info(f"Loading company profiles from {path}")
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    companies = data.get('companies') or []
    if not isinstance(companies, list):
        raise ValueError(f"'companies' in {path} must be a list")
    return companies


def company_fields(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Map a YAML company entry onto Company columns; omitted keys keep column defaults."""
    fields = {key: entry[key] for key in PROFILE_FIELDS if key in entry}
    for key, column in HIRING_BAR_FIELDS.items():
        if key in (entry.get('hiring_bar') or {}):
            fields[column] = entry['hiring_bar'][key]
    return fields


def seed_companies(session, entries: List[Dict[str, Any]]) -> int:
    repo = CompanyRepository(session)
    count = 0
    for entry in entries:
        name = entry.get('name')
        if not name:
            logger.warning(f"Skipping company entry without a name: {entry}")
            continue
        repo.upsert(name, company_fields(entry))
        count += 1
    return count


def main():
    parser = argparse.ArgumentParser(description="Intervyo preparation engine")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='Create database tables (retries while the database starts)')

    seed_parser = subparsers.add_parser('seed-companies', help='Create or update company profiles from YAML')
    seed_parser.add_argument('path', type=str, help='YAML file with a top-level companies list')

    subparsers.add_parser('serve', help='Run the API server')

    args = parser.parse_args()

    if args.command == 'init-db':
        init_db()
    elif args.command == 'seed-companies':
        init_db()
        entries = load_company_profiles(args.path)
        with db_session_scope() as session:
            count = seed_companies(session, entries)
        logger.info(f"Seeded {count} company profiles")
    elif args.command == 'serve':
        config = load_config()
        logger.info(f"Serving on {config.web.host}:{config.web.port}")
        from web.backend.app import main as serve
        serve()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
