"""
Tests for the flask CLI commands.
"""


class TestEvaluateCommand:

    def test_valid_measurements(self, runner):
        result = runner.invoke(args=[
            'evaluate', '--weeks', '21', '--days', '3',
            '--lhn', '4.50', '--lpn', '4.00', '--dbp', '50.00',
        ])
        assert result.exit_code == 0
        assert 'Results' in result.output
        assert 'Nasal bone percentile: 50.00 (Normal)' in result.output
        assert 'LPN/LHN ratio: 0.89 (Normal)' in result.output
        assert 'DBP/LHN ratio: 11.11 (Normal)' in result.output

    def test_spanish_output(self, runner):
        result = runner.invoke(args=[
            'evaluate', '--weeks', '20', '--days', '0',
            '--lhn', '2.84', '--lpn', '2.0', '--dbp', '30', '--lang', 'es',
        ])
        assert result.exit_code == 0
        assert 'Resultados' in result.output
        assert 'Percentil del hueso nasal: 1.00 (Anormal)' in result.output

    def test_missing_measurements(self, runner):
        result = runner.invoke(args=['evaluate'])
        assert result.exit_code == 1
        assert 'gestational age weeks out of range' in result.output
        assert 'biparietal diameter must be positive' in result.output
        assert 'Results' not in result.output

    def test_unsupported_language(self, runner):
        result = runner.invoke(args=['evaluate', '--lang', 'fr'])
        assert result.exit_code == 2


class TestPercentileTableCommand:

    def test_prints_all_weeks(self, runner):
        result = runner.invoke(args=['percentile-table'])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith('week')
        assert len(lines) == 5
        assert lines[4].startswith('23')
        assert '9.49' in lines[4]


class TestEvaluateCommandOversizedInput:

    def test_huge_week_number(self, runner):
        result = runner.invoke(args=[
            'evaluate', '--weeks', '2' * 5000, '--days', '3',
            '--lhn', '4.5', '--lpn', '4', '--dbp', '50',
        ])
        assert result.exit_code == 1
        assert 'gestational age weeks out of range' in result.output
