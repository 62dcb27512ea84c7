import pytest

from localekeys.core.exceptions import ExportError
from localekeys.core.models import FlatEntry
from localekeys.exporters.constants_exporter import render_constants
from localekeys.exporters.file_writer import write_generated_file
from localekeys.exporters.messages_exporter import render_messages
from localekeys.exporters.python_source import quote_string, render_mapping
from localekeys.extractors.key_flattener import resolve
from localekeys.extractors.locale_table import build_locale_table
from localekeys.runtime import Translations

from conftest import LOGIN, document


def run_module(text, filename):
    namespace = {}
    exec(compile(text, filename, "exec"), namespace)
    return namespace


def test_render_constants_login():
    text = render_constants(resolve(document(LOGIN).root))
    assert text == (
        "# DO NOT EDIT. This is code generated via localekeys\n"
        "# flake8: noqa\n"
        "\n"
        "\n"
        "class LocaleKeys:\n"
        '    login_title = "login.title"\n'
        '    login_button_ok = "login.button.ok"\n'
        '    login_button = "login.button"\n'
        '    login = "login"\n'
    )


def test_rendered_constants_compile():
    namespace = run_module(render_constants(resolve(document(LOGIN).root)), "locale_keys.py")
    keys = namespace["LocaleKeys"]
    assert keys.login_button_ok == "login.button.ok"
    assert keys.login == "login"


def test_custom_class_name_and_empty_entries():
    text = render_constants([], class_name="Keys")
    assert "class Keys:\n    pass\n" in text
    assert "Keys" in run_module(text, "keys.py")


def test_dotted_key_is_escaped_only_in_rendering():
    entry = FlatEntry("a_q", 'a.say "hi"\\now\n')
    text = render_constants([entry])
    assert '    a_q = "a.say \\"hi\\"\\\\now\\n"' in text
    assert run_module(text, "keys.py")["LocaleKeys"].a_q == 'a.say "hi"\\now\n'


@pytest.mark.parametrize("value", ['plain', 'quote " here', 'back\\slash', 'tab\tand\r\n', 'bell\x07', 'naïve ☃'])
def test_quote_string_produces_equal_literal(value):
    assert eval(quote_string(value)) == value


def test_render_mapping_layout():
    assert render_mapping({}) == "{}"
    assert render_mapping({"en": {"a": "b"}, "fr": {}}) == (
        '{\n'
        '    "en": {\n'
        '        "a": "b",\n'
        '    },\n'
        '    "fr": {},\n'
        '}'
    )


def test_render_mapping_rejects_non_string_values():
    with pytest.raises(TypeError):
        render_mapping({"en": {"a": 1}})


def test_render_messages_embeds_table():
    table = build_locale_table([document(LOGIN, "en"), document({"login": {"title": "Connexion"}}, "fr")])
    text = render_messages(table)
    assert text.startswith("# DO NOT EDIT. This is code generated via localekeys\n")
    assert "from localekeys.runtime import Translations\n" in text
    assert "class AppMessages(Translations):\n    keys = MESSAGES\n" in text

    namespace = run_module(text, "app_messages.py")
    messages = namespace["AppMessages"]
    assert issubclass(messages, Translations)
    assert messages.keys == table
    assert list(messages.keys["en"]) == list(table["en"])
    assert messages().translate("login.title", "fr") == "Connexion"


def test_render_messages_escapes_values():
    table = {"en": {"multi": 'line one\nline "two"'}}
    namespace = run_module(render_messages(table), "app_messages.py")
    assert namespace["MESSAGES"] == table


def test_write_generated_file_creates_parents_and_overwrites(tmp_path):
    target = tmp_path / "lib" / "generated" / "locale_keys.py"
    write_generated_file(target, "first\n")
    write_generated_file(target, "second\n")
    assert target.read_text(encoding="utf-8") == "second\n"


def test_write_generated_file_reports_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(ExportError) as exc_info:
        write_generated_file(blocker / "locale_keys.py", "x")
    assert exc_info.value.output_path == blocker / "locale_keys.py"


def test_write_generated_file_rejects_unencodable_text(tmp_path):
    target = tmp_path / "out" / "locale_keys.py"
    with pytest.raises(ExportError, match="not encodable"):
        write_generated_file(target, 'a = "\ud800"\n')
    assert not target.parent.exists()


def test_write_generated_file_leaves_no_temporary_files(tmp_path):
    target = tmp_path / "locale_keys.py"
    write_generated_file(target, "x = 1\n")
    assert [p.name for p in tmp_path.iterdir()] == ["locale_keys.py"]
