from string_analyzer import config


class TestConfigHelpers:

    def test_as_bool(self):
        assert config._as_bool("true") is True
        assert config._as_bool(" Yes ") is True
        assert config._as_bool("false") is False
        assert config._as_bool("") is False

    def test_as_list(self):
        assert config._as_list("*") == ["*"]
        assert config._as_list("http://a.test, http://b.test,") == ["http://a.test", "http://b.test"]

    def test_defaults_are_typed(self):
        assert isinstance(config.PORT, int)
        assert isinstance(config.CORS_ORIGINS, list)
