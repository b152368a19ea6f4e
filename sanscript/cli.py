# -*- coding: utf-8 -*-
"""Command line front end::

    $ sanscript hk devanagari 'rAma'
    राम
    $ echo 'idam' | sanscript hk iast
    idam
"""

import logging
import sys

import click

import sanscript
from sanscript.errors import SanscriptError
from sanscript.log import FORMATTERS, setup_logging

logger = logging.getLogger(__name__)


def _list_schemes(ctx, param, value):
  if not value or ctx.resilient_parsing:
    return
  for name in sanscript.SCHEMES:
    kind = 'roman' if sanscript.is_roman_scheme(name) else 'brahmic'
    click.echo('%s\t%s' % (name, kind))
  ctx.exit()


@click.command()
@click.argument('from_scheme', metavar='FROM')
@click.argument('to_scheme', metavar='TO')
@click.argument('text', required=False)
@click.option('--skip-sgml', is_flag=True,
              help='Copy <...> tags through unchanged.')
@click.option('--syncope', is_flag=True,
              help="Don't add a virama after a final consonant.")
@click.option('--list', 'list_schemes', is_flag=True, expose_value=False,
              is_eager=True, callback=_list_schemes,
              help='List the known schemes and exit.')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                                case_sensitive=False))
@click.option('--log-format', default='pretty', show_default=True,
              type=click.Choice(sorted(FORMATTERS)))
def main(from_scheme, to_scheme, text, skip_sgml, syncope, log_level,
         log_format):
  """Transliterate TEXT, or standard input, from FROM to TO."""
  setup_logging(log_level, log_format)
  if text is not None:
    lines = [text]
  else:
    lines = sys.stdin.read().splitlines()
  logger.info('Transliterating %d line(s) from %s to %s',
              len(lines), from_scheme, to_scheme)

  for line in lines:
    try:
      output = sanscript.transliterate(line, from_scheme, to_scheme,
                                       skip_sgml=skip_sgml, syncope=syncope)
    except SanscriptError as e:
      raise click.ClickException(str(e)) from e
    click.echo(output)


if __name__ == '__main__':
  main()
