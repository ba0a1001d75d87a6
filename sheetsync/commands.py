"""Action identifiers the UI can trigger, mapped to their handlers.

Every handler takes a :class:`Workspace` plus keyword parameters and returns
a plain dict with at least ``success`` and ``message``. Use :func:`dispatch`
so that errors come back in that same shape.
"""
import logging
from dataclasses import dataclass

import requests
from django.conf import settings
from django.utils.module_loading import import_string

from sheetsync.config import load_config, save_config as store_config
from sheetsync.exceptions import SyncError
from sheetsync.grids.base import BaseGrid
from sheetsync.properties import document_properties, user_properties
from sheetsync.sync import CatalogSyncEngine
from sheetsync.tracker import DeletionTracker

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    document_id: str
    user_id: str
    grid: BaseGrid


def build_engine(workspace, config=None):
    if config is None:
        config = load_config(user_properties(workspace.user_id))
    client_class = import_string(settings.SHEETSYNC_CLIENT_CLASS)
    return CatalogSyncEngine(
        config=config,
        workspace_id=workspace.document_id,
        grid=workspace.grid,
        tracker=DeletionTracker(document_properties(workspace.document_id)),
        client=client_class(config),
    )


def save_config(workspace, base_url, secret_key=None):
    config = store_config(user_properties(workspace.user_id), base_url, secret_key)
    return {'success': True, 'message': 'Settings saved', **config.as_dict()}


def get_config(workspace):
    config = load_config(user_properties(workspace.user_id))
    return {'success': True, 'message': '', **config.as_dict()}


def fetch_products(workspace):
    return build_engine(workspace).fetch().as_dict()


def update_selected_products(workspace, first_row, last_row):
    return build_engine(workspace).push_selected(first_row, last_row).as_dict()


def update_all_products(workspace):
    return build_engine(workspace).push_all().as_dict()


def test_connection(workspace):
    return build_engine(workspace).test_connection().as_dict()


COMMANDS = {
    'save_config': save_config,
    'get_config': get_config,
    'fetch_products': fetch_products,
    'update_selected_products': update_selected_products,
    'update_all_products': update_all_products,
    'test_connection': test_connection,
}


def dispatch(action, workspace, **params):
    handler = COMMANDS.get(action)
    if handler is None:
        return {'success': False, 'message': f"Unknown action: {action}"}

    try:
        return handler(workspace, **params)
    except SyncError as exc:
        logger.error("Action %s failed: %s", action, exc.message)
        return {'success': False, 'message': exc.message}
    except requests.RequestException as exc:
        logger.error("Action %s failed: %s", action, exc)
        return {'success': False, 'message': str(exc)}
    except Exception as exc:
        logger.exception("Action %s failed unexpectedly", action)
        return {'success': False, 'message': str(exc)}
