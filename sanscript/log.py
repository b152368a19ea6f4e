# -*- coding: utf-8 -*-
"""Logging setup for the command line.

The library itself only creates loggers; handlers are installed here, by
:func:`setup_logging`, and only the CLI calls it.
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
  """Format log records as JSON lines."""

  def format(self, record):
    log_data = {
      'timestamp': datetime.now(timezone.utc).isoformat(),
      'level': record.levelname,
      'logger': record.name,
      'message': record.getMessage(),
    }
    if record.exc_info:
      log_data['exception'] = self.formatException(record.exc_info)
    return json.dumps(log_data, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
  """Format log records in human-readable format."""

  def __init__(self):
    super(PrettyFormatter, self).__init__(
      fmt='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
    )


FORMATTERS = {
  'pretty': PrettyFormatter,
  'json': JSONFormatter,
}


def setup_logging(level='WARNING', format_type='pretty'):
  """Send the ``sanscript`` loggers to stderr.

  :param level: a level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
  :param format_type: ``pretty`` or ``json``
  :return: the configured ``sanscript`` logger
  """
  logger = logging.getLogger('sanscript')
  logger.setLevel(getattr(logging, level.upper()))
  logger.handlers.clear()

  handler = logging.StreamHandler(sys.stderr)
  handler.setFormatter(FORMATTERS[format_type]())
  logger.addHandler(handler)
  return logger
