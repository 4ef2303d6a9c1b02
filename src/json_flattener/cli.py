"""Command-line interface for the JSON Flattener."""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .document_flattener import DocumentFlattener
from .types import DocumentFormat, ProcessingError

USAGE = """Usage: json-flattener <json-string> [delimiter]
Example: json-flattener '{"user":{"name":"john"}}' '.'"""

FORMAT_CHOICE = click.Choice([f.value for f in DocumentFormat], case_sensitive=False)


@click.command()
@click.argument('document', required=False)
@click.argument('delimiter', required=False, default='.')
@click.option('--input-format', '-i', type=FORMAT_CHOICE, default='json',
              help='Format of DOCUMENT (default: json)')
@click.option('--output-format', '-o', type=FORMAT_CHOICE, default=None,
              help='Format of the output (default: same as input)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--profile', is_flag=True, help='Print conversion metrics to stderr')
@click.version_option(version=__version__)
def main(document: Optional[str], delimiter: str, input_format: str,
         output_format: Optional[str], verbose: bool, profile: bool):
    """Flatten DOCUMENT into delimiter-joined keys (use - to read stdin)."""
    if document is None:
        click.echo(USAGE, err=True)
        sys.exit(1)
    
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    
    if document == '-':
        document = click.get_text_stream('stdin').read()
    
    flattener = DocumentFlattener(enable_profiling=profile)
    source = DocumentFormat(input_format.lower())
    target = DocumentFormat(output_format.lower()) if output_format else source
    
    try:
        result = flattener.convert(document, delimiter, source, target)
    except ProcessingError as e:
        click.echo(f"Error: {e}", err=True)
        if verbose:
            response = flattener.error_handler.handle_processing_error(e)
            click.echo(response.suggested_action, err=True)
        sys.exit(1)
    
    text = result.decode('utf-8')
    click.echo(text, nl=not text.endswith('\n'))
    
    if profile:
        click.echo(flattener.profiler.export_metrics("summary"), err=True)


if __name__ == '__main__':
    main()
