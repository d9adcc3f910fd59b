"""Fidelis command line tool."""
import click
import httpx

from fidelis import __version__, codes
from fidelis.cache import create_store
from fidelis.error import InputValidationError
from fidelis.pipeline import create_pipeline
from fidelis.report import SummaryRendererRegistry

from . import async_command


@click.group()
@click.version_option(version=__version__)
def cli():
    """Fidelis verification and eligibility pipeline."""
    pass


def _fail(error: InputValidationError):
    lines = [f"{field}: {message}" for field, message in error.field_errors.items()]
    raise click.ClickException("\n".join(lines) or error.message)


@cli.command()
@click.option('--mobile', required=True, help='Applicant mobile number')
@click.option('--pan', required=True, help='Applicant PAN')
@click.option('--email', default=None, help='Applicant email address')
@click.option('--rc', 'registration_number', required=True, help='Vehicle registration number')
@click.option('--income', 'monthly_income', required=True, type=float, help='Declared monthly income')
@click.option('--employment', 'employment_type', required=True,
              type=click.Choice(['S', 'N', 'E', 'P'], case_sensitive=False),
              help='S: Salaried, N: Non-Salaried, E: Self-employed, P: Self-employed Professional')
@click.option('--candidate', 'candidate_id', default=None,
              help='Tradeline to refinance (defaults to the matched financer account)')
@click.option('--style', default='full', type=click.Choice(SummaryRendererRegistry.keys()))
@click.option('--base-url', default=None, help='Base URL of the verification services')
@click.option('--cache-file', default=None, type=click.Path(dir_okay=False),
              help='Keep the local fallback store in this JSON file')
@click.option('--output', '-o', default=None, type=click.File('w'), help='Also write the summary here')
@async_command
async def onboard(mobile, pan, email, registration_number, monthly_income, employment_type,
                  candidate_id, style, base_url, cache_file, output):
    """Run the whole onboarding pipeline and print the summary."""
    store = create_store('json-file', filepath=cache_file) if cache_file else create_store()

    async with httpx.AsyncClient() as client:
        pipeline = create_pipeline(client=client, store=store, base_url=base_url)

        try:
            await pipeline.submit_mobile(mobile)
            await pipeline.submit_identity(pan, email=email)
            await pipeline.confirm_score()
            await pipeline.submit_vehicle(registration_number)

            if candidate_id is None and not pipeline.financer_match.has_match:
                candidates = pipeline.financer_match.candidates
                candidate_id = candidates[0].candidate_id
                click.echo(f"No financer match, using candidate [{candidate_id}]", err=True)

            await pipeline.submit_selection(candidate_id, monthly_income, employment_type.upper())
        except InputValidationError as e:
            _fail(e)

    text = pipeline.render(style)
    click.echo(text)
    if output is not None:
        output.write(text)


@cli.command(name='codes')
@click.argument('category', required=False, type=click.Choice(codes.categories()))
@click.argument('code_values', nargs=-1)
def lookup_codes(category, code_values):
    """Decode bureau codes. Without arguments, list the categories."""
    if category is None:
        for name in codes.categories():
            click.echo(name)
        return

    if not code_values:
        for key, desc in sorted(codes.CODE_TABLES[codes.CodeCategory(category)].items()):
            click.echo(f"{key}\t{desc}")
        return

    for value in code_values:
        click.echo(f"{value}\t{codes.describe(category, value)}")


if __name__ == '__main__':
    cli()
