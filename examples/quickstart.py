"""Quickstart example for phrasestore.

This example demonstrates registering phrase documents, loading them and
translating keys.

Note: Translations never raise. A failed lookup returns a sentinel string
starting with "i18nErr: ", which this example prints as is.
"""

import logging
import tempfile
from pathlib import Path

from phrasestore import AlreadyExistsError, Client, ClientConfig

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Raw documents
print("=" * 50)
print("Example 1: Raw YAML and TOML Documents")
print("=" * 50)

client = Client()
client.register(
    b"""
__metadata__:
  locale: en_US
menu:
  file:
    open: Open
    close: Close
greeting: Hello, {{name}}!
""",
    """
[__metadata__]
locale = "de_DE"

[menu.file]
open = "Öffnen"
close = "Schließen"
""".encode(),
)
client.commit_load()

print(client.translate("en_US", "menu/file/open"))
# Output: Open

print(client.translate("de_DE", "menu/file/close"))
# Output: Schließen

print(client.translate("en_US", "greeting", {"name": "Alice"}))
# Output: Hello, Alice!

# Example 2: Failed lookups
print("\n" + "=" * 50)
print("Example 2: Sentinel Strings")
print("=" * 50)

print(client.translate("en_US", "menu/file/save"))
# Output: i18nErr: TranslationNotFound. Key: menu/file/save

print(client.translate("fr_FR", "menu/file/open"))
# Output: i18nErr: LocaleIsNil. Key: menu/file/open

# Example 3: Default locale
print("\n" + "=" * 50)
print("Example 3: Default Locale Fallback")
print("=" * 50)

client.mark_as_default("en_US")
print(client.translate("fr_FR", "menu/file/open"))
# Output: Open

# Example 4: Locale directories
print("\n" + "=" * 50)
print("Example 4: Locale Names From Paths")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir) / "locales"
    (root / "en_US").mkdir(parents=True)
    (root / "en_US" / "main.yaml").write_text("title: Home\n", encoding="utf-8")
    (root / "main.lv_LV.toml").write_text('title = "Sākums"\n', encoding="utf-8")

    client.register(root)
    client.commit_load()

summary = client.get_load_summary()
print(summary)
# Output: LoadSummary(sources=2, locales=2, phrases=2)

print(client.translate("lv_LV", "title"))
# Output: Sākums

# Example 5: Conflicts
print("\n" + "=" * 50)
print("Example 5: Duplicate Keys")
print("=" * 50)

first = b"__metadata__: {locale: en_US}\ntitle: Home\n"
second = b"__metadata__: {locale: en_US}\ntitle: Start\n"

strict = Client()
strict.register(first, second)
try:
    strict.commit_load()
except AlreadyExistsError as exc:
    print(exc)

relaxed = Client(ClientConfig(overwrite_existing_key=True))
relaxed.register(first, second)
relaxed.commit_load()
print(relaxed.translate("en_US", "title"))
# Output: Start
