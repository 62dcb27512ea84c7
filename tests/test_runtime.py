from localekeys.runtime import Translations


class Messages(Translations):
    keys = {
        "en": {"login_title": "Sign in", "greeting": "Hello {name}", "only_en": "English"},
        "fr": {"login_title": "Connexion", "greeting": "Bonjour {name}"},
    }


def test_lookup_by_table_key_and_dotted_key():
    messages = Messages()
    assert messages.translate("login_title", "fr") == "Connexion"
    assert messages.translate("login.title", "fr") == "Connexion"


def test_missing_key_returns_key():
    assert Messages().translate("nope.key", "en") == "nope.key"


def test_fallback_locale():
    assert Messages().translate("only_en", "fr", fallback_locale="en") == "English"
    assert Messages().translate("only_en", "fr") == "only_en"


def test_language_part_of_locale():
    messages = Messages()
    assert messages.resolve_locale("fr_CA") == "fr"
    assert messages.resolve_locale("en-GB") == "en"
    assert messages.resolve_locale("ja") is None
    assert messages.translate("login_title", "fr-FR") == "Connexion"


def test_default_locale_and_alias():
    messages = Messages(default_locale="fr")
    assert messages.tr("login_title") == "Connexion"
    assert messages.locales() == ("en", "fr")


def test_format_params():
    messages = Messages()
    assert messages.translate("greeting", "en", name="Ada") == "Hello Ada"
    assert messages.translate("greeting", "fr", other="x") == "Bonjour {name}"
