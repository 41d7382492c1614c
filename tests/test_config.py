from api.cli import build_parser
from api.config import Settings


def test_defaults(monkeypatch):
    for name in ("NODE_ENV", "PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.node_env is None
    assert settings.environment == "development"
    assert settings.port == 3000
    assert settings.performance_delay_ms == 100
    assert settings.allowed_header_list == ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_HEADERS", "Content-Type,Authorization")
    settings = Settings(_env_file=None)
    assert settings.environment == "production"
    assert settings.port == 8080
    assert settings.allowed_header_list == ["Content-Type", "Authorization"]


def test_cli_defaults_follow_settings():
    settings = Settings(_env_file=None, PORT=4567, HOST="127.0.0.1")
    args = build_parser(settings).parse_args([])
    assert args.port == 4567
    assert args.host == "127.0.0.1"

    args = build_parser(settings).parse_args(["--port", "9000", "--log-level", "debug"])
    assert args.port == 9000
    assert args.log_level == "debug"
