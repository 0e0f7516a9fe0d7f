from src.common.config import Config


def test_defaults_when_file_missing(tmp_path):
    config = Config.from_yaml(tmp_path / "missing.yaml")

    assert config.server.port == 3000
    assert config.server.cors_origins == ["*"]
    assert config.google.is_complete() is False
    assert config.log_level == "INFO"


def test_yaml_then_env_overrides(tmp_path):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text(
        """
server:
  port: 8080
  cors_origins: ["http://localhost:5173"]
google:
  client_id: "yaml-id"
  timeout_seconds: 4
log:
  level: "DEBUG"
  file: "logs/test.log"
""",
        encoding="utf-8",
    )

    config = Config.load(
        config_path,
        environ={
            "PORT": "9000",
            "GOOGLE_CLIENT_SECRET": "env-secret",
            "GOOGLE_REDIRECT_URI": "https://app.example/cb",
            "CORS_ORIGINS": "https://a.example, https://b.example,",
        },
    )

    assert config.server.port == 9000
    assert config.server.cors_origins == ["https://a.example", "https://b.example"]
    assert config.google.client_id == "yaml-id"
    assert config.google.client_secret == "env-secret"
    assert config.google.timeout_seconds == 4.0
    assert config.google.is_complete() is True
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/test.log"


def test_from_env_only():
    config = Config.from_env({"GOOGLE_CLIENT_ID": "id", "LOG_LEVEL": "WARNING"})

    assert config.google.client_id == "id"
    assert config.log_level == "WARNING"
    assert config.server.host == "0.0.0.0"


def test_setup_logger_creates_log_directory(tmp_path):
    from src.common.logger import setup_logger

    log_file = tmp_path / "logs" / "diary.log"
    setup_logger(log_level="debug", log_file=str(log_file))

    assert log_file.parent.is_dir()
