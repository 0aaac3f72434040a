import click
from flask import Flask, current_app

from nasal_bone.services.evaluator_service import RawInput, InvalidMeasurements, evaluate
from nasal_bone.services.interpretation_service import interpret, format_interpretation
from nasal_bone.utils.i18n import SUPPORTED_LANGUAGES, get_translation
from nasal_bone.utils.ob_calculators import PERCENTILE_BANDS, PERCENTILE_TABLE


def register_cli(app: Flask) -> None:
    """
    Adds small helper CLI commands:
    - flask evaluate: evaluate one set of measurements
    - flask percentile-table: print the nasal bone reference table
    """

    @app.cli.command("evaluate")
    @click.option("--weeks", default="", help="Gestational age, whole weeks (20-23).")
    @click.option("--days", default="", help="Gestational age, extra days (0-6).")
    @click.option("--lhn", default="", help="Nasal bone length (mm).")
    @click.option("--lpn", default="", help="Prenasal length (mm).")
    @click.option("--dbp", default="", help="Biparietal diameter (mm).")
    @click.option("--lang", type=click.Choice(SUPPORTED_LANGUAGES), default=None,
                  help="Message language (defaults to DEFAULT_LANGUAGE).")
    def evaluate_command(weeks, days, lhn, lpn, dbp, lang):
        """Evaluate nasal bone measurements."""
        language = lang or current_app.config.get('DEFAULT_LANGUAGE', 'en')
        raw = RawInput(weeks, days, lhn, lpn, dbp)
        try:
            result = evaluate(raw, language)
        except InvalidMeasurements as e:
            click.echo(get_translation('fix_errors', language), err=True)
            for message in e.messages:
                click.echo(f"  - {message}", err=True)
            raise SystemExit(1)

        click.echo(get_translation('results', language))
        for line in format_interpretation(interpret(result, language)):
            click.echo(f"  {line}")

    @app.cli.command("percentile-table")
    def percentile_table_command():
        """Print the nasal bone percentile table (mm)."""
        click.echo("week  " + "  ".join(f"p{band:<4}" for band in PERCENTILE_BANDS))
        for week, thresholds in sorted(PERCENTILE_TABLE.items()):
            click.echo(f"{week:<4}  " + "  ".join(f"{value:<5.2f}" for value in thresholds))
