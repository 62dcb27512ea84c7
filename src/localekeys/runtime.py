"""Runtime lookup base class used by the generated messages module.

Generated modules subclass Translations and bind ``keys`` to the embedded
table::

    from generated.app_messages import AppMessages
    from generated.locale_keys import LocaleKeys

    AppMessages().translate(LocaleKeys.login_title, "en")
"""

from typing import Any, Dict, Optional, Tuple

from localekeys.core.constants import KeySeparators


class Translations:
    """Translation provider backed by a document name -> key -> message table."""

    keys: Dict[str, Dict[str, str]] = {}

    def __init__(self, default_locale: Optional[str] = None):
        self.default_locale = default_locale

    def locales(self) -> Tuple[str, ...]:
        return tuple(self.keys)

    def resolve_locale(self, locale: Optional[str]) -> Optional[str]:
        """
        Map a requested locale to a table entry.

        Tries the exact name, then the language part ('pt_BR' or 'pt-BR'
        gives 'pt').
        """
        if not locale:
            return None
        if locale in self.keys:
            return locale
        language = locale.replace('-', '_').split('_')[0]
        if language in self.keys:
            return language
        return None

    def lookup(self, key: str, locale: Optional[str]) -> Optional[str]:
        """
        Message for ``key`` in ``locale``, or None.

        ``key`` may be a table key ('login_title') or a dotted key
        ('login.title').
        """
        table = self.keys.get(self.resolve_locale(locale) or '', {})
        if key in table:
            return table[key]
        return table.get(key.replace(KeySeparators.DOTTED, KeySeparators.SYMBOLIC))

    def translate(self, key: str, locale: Optional[str] = None,
                  fallback_locale: Optional[str] = None, **params: Any) -> str:
        """
        Translate ``key``.

        Args:
            key: Table key or dotted key
            locale: Requested locale (defaults to ``default_locale``)
            fallback_locale: Locale tried when the key is missing in ``locale``
            **params: Values substituted with str.format

        Returns:
            The message, or ``key`` itself when no locale has it
        """
        message = self.lookup(key, locale or self.default_locale)
        if message is None and fallback_locale:
            message = self.lookup(key, fallback_locale)
        if message is None:
            return key
        if not params:
            return message
        try:
            return message.format(**params)
        except (KeyError, IndexError, ValueError):
            return message

    tr = translate
