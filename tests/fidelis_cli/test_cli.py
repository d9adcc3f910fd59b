from click.testing import CliRunner

from fidelis import __version__
from fidelis.cli.main import cli


def test_version():
    result = CliRunner().invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_codes_categories():
    result = CliRunner().invoke(cli, ['codes'])
    assert result.exit_code == 0
    assert "account-type" in result.output.splitlines()


def test_codes_decode():
    result = CliRunner().invoke(cli, ['codes', 'account-type', '1', '10', '999'])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["1\tAUTO LOAN", "10\tCREDIT CARD", "999\t999"]


def test_codes_table():
    result = CliRunner().invoke(cli, ['codes', 'gender'])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["1\tMale", "2\tFemale", "3\tTransgender"]


def test_codes_unknown_category():
    result = CliRunner().invoke(cli, ['codes', 'colour'])
    assert result.exit_code != 0


def test_onboard_invalid_input():
    result = CliRunner().invoke(cli, [
        'onboard', '--mobile', '12345', '--pan', 'ABCDE1234F', '--rc', 'RJ14AB1234',
        '--income', '50000', '--employment', 'S', '--base-url', 'http://127.0.0.1:9/api',
    ])
    assert result.exit_code == 1
    assert "mobile" in result.output


def test_onboard_offline(tmp_path):
    cache_file = tmp_path / 'cache.json'
    output = tmp_path / 'summary.txt'

    result = CliRunner().invoke(cli, [
        'onboard', '--mobile', '9876543210', '--pan', 'ABCDE1234F', '--rc', 'RJ14AB1234',
        '--income', '50000', '--employment', 's', '--style', 'compact',
        '--base-url', 'http://127.0.0.1:9/api',
        '--cache-file', str(cache_file), '--output', str(output),
    ])

    assert result.exit_code == 0, result.output
    assert "User 1234" in result.output
    assert "Products: 3 eligible" in result.output
    assert cache_file.exists()
    assert output.read_text().startswith("Loan Onboarding Report #")
