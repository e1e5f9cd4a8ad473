"""
Resource Corrections

Both jobs work on a minimal table description rather than the ORM model, so
they run the same from a migration step and from the command line.
"""

import logging

import sqlalchemy as sa
from sqlalchemy import and_, func, not_

from .base import BatchCorrection

logger = logging.getLogger(__name__)

LINK = 'Link'

resources = sa.table(
    'resources',
    sa.column('id', sa.Uuid()),
    sa.column('title', sa.String()),
    sa.column('url', sa.String()),
    sa.column('type', sa.String()),
)


def _has_url():
    return and_(resources.c.url.isnot(None), resources.c.url != '')


class ResourceTypeCorrection(BatchCorrection):
    """Resources that carry a URL are links"""

    name = 'resource-types'
    table = resources

    def predicate(self):
        return and_(_has_url(), resources.c.type != LINK)

    def correct(self, connection, row):
        connection.execute(
            resources.update().where(resources.c.id == row['id']).values(type=LINK)
        )
        logger.info('Resource %s (%s): type %s -> %s', row['id'], row['title'], row['type'], LINK)


class ResourceUrlCorrection(BatchCorrection):
    """Give scheme-less resource URLs an https:// prefix and mark them as links"""

    name = 'resource-urls'
    table = resources

    def predicate(self):
        url = func.lower(resources.c.url)
        return and_(
            _has_url(),
            not_(url.startswith('http://')),
            not_(url.startswith('https://')),
        )

    def correct(self, connection, row):
        url = normalize_url(row['url'])
        connection.execute(
            resources.update().where(resources.c.id == row['id']).values(url=url, type=LINK)
        )
        logger.info('Resource %s (%s): url %s -> %s', row['id'], row['title'], row['url'], url)


def normalize_url(url):
    """Prefix https:// unless the URL already has an http(s) scheme"""
    url = url.strip()
    if url.lower().startswith(('http://', 'https://')):
        return url
    return 'https://' + url
