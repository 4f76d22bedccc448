from src.platform.config.core_setting import Settings
from src.platform.constant.path import BASE_DIR


ENV_EXAMPLE = BASE_DIR / '.env.example'


class TestSettings:
    def test_loads_shipped_env_example(self, monkeypatch):
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        config = Settings(_env_file=ENV_EXAMPLE)

        assert config.BACKEND_CORS_ORIGINS == ['http://localhost:3000']
        assert config.RESERVATION_SERIALIZABLE_INSERT is False

    def test_comma_separated_origins(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.test, http://b.test')

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    def test_json_list_origins(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://a.test"]')

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ['http://a.test']
