import pytest

from tabstat.constants import EnvVars

_ENV_VARS = (
    EnvVars.SEPARATOR,
    EnvVars.HEADER_SKIP,
    EnvVars.HEAD_ROWS,
    EnvVars.STDDEV_DDOF,
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment and tabstat.toml out of the tests.

    ConfigLoader reads TABSTAT_* variables and a tabstat.toml in the working
    directory; tests start from defaults unless they set these explicitly.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
