import logging

from celery import shared_task
from django.conf import settings
from django.utils.module_loading import import_string

from sheetsync.commands import Workspace, dispatch

logger = logging.getLogger(__name__)


def _workspace(document_id, user_id):
    grid_class = import_string(settings.SHEETSYNC_GRID_CLASS)
    return Workspace(document_id=document_id, user_id=user_id, grid=grid_class(document_id=document_id))


@shared_task
def fetch_products(document_id, user_id):
    result = dispatch('fetch_products', _workspace(document_id, user_id))
    logger.info("Fetch task for %s finished: %s", document_id, result['message'])
    return result


@shared_task
def push_products(document_id, user_id, first_row=None, last_row=None):
    workspace = _workspace(document_id, user_id)
    if first_row is None:
        result = dispatch('update_all_products', workspace)
    else:
        result = dispatch(
            'update_selected_products', workspace,
            first_row=first_row, last_row=last_row if last_row is not None else first_row,
        )
    logger.info("Push task for %s finished: %s", document_id, result['message'])
    return result
