"""Quickstart example for icureport.

Builds a small report containing message references, then localizes it into
several locales, including the accented and bidi pseudo-locales.

Note: Examples use a private LocaleDataStore so that registering the audit's
own strings does not touch the process-wide default store.
"""

from pathlib import Path

from icureport import (
    UI_STRINGS,
    IcuReportError,
    LocaleDataStore,
    format_icu_message,
    get_formatted,
    get_renderer_formatted_strings,
    lookup_locale,
    make_reference_factory,
    replace_icu_message_instance_ids,
    validate_locale_data,
)
from icureport.localization import BUNDLED_LOCALES_DIR

EXAMPLES_DIR = Path(__file__).resolve().parent

# An audit module declares its UI strings and mints references from them
AUDIT_STRINGS = {
    "title": "Serve images in modern formats",
    "displayValue": "{itemCount, plural, =1{1 image found} other{# images found}}",
}
str_ = make_reference_factory(__file__, AUDIT_STRINGS, root=EXAMPLES_DIR)

store = LocaleDataStore.from_directory(BUNDLED_LOCALES_DIR)
for locale, translations in {
    "en": AUDIT_STRINGS,
    "de": {
        "title": "Bilder in modernen Formaten bereitstellen",
        "displayValue": "{itemCount, plural, =1{1 Bild gefunden} other{# Bilder gefunden}}",
    },
}.items():
    table = dict(store[locale])
    for key, message in translations.items():
        table[str_(AUDIT_STRINGS[key]).id] = {"message": message}
    store.register_locale_data(locale, table)

# Example 1: One reference
print("=" * 50)
print("Example 1: Formatting a Reference")
print("=" * 50)

savings = str_(UI_STRINGS["displayValueByteSavings"], {"wastedBytes": 151552})
print(savings.id)
# Output: icureport/localization/registry.py | displayValueByteSavings
for locale in ("en", "de", "es", "en-XA"):
    print(f"{locale:6} {format_icu_message(locale, savings, store=store)}")
# Output:
# en     Potential savings of 148 KB
# de     Mögliche Einsparung von 148 KB
# es     Ahorro potencial de 148 KB
# en-XA  [Þöţéñţîåļ šåṽîñĝš öƒ 148 ĶƁ]

# Example 2: Whole report
print("\n" + "=" * 50)
print("Example 2: Localizing a Report")
print("=" * 50)

report = {
    "audits": {
        "modern-image-formats": {
            "title": str_(AUDIT_STRINGS["title"]),
            "displayValue": str_(AUDIT_STRINGS["displayValue"], {"itemCount": 1200}),
            "details": {
                "headings": [
                    {"key": "url", "text": str_(UI_STRINGS["columnURL"])},
                    {"key": "wastedMs", "text": str_(UI_STRINGS["columnWastedMs"])},
                ],
            },
        },
    },
    "timing": {"total": str_(UI_STRINGS["seconds"], {"timeInMs": 5234})},
}
locale = lookup_locale("de-AT", store.available_locales)
paths = replace_icu_message_instance_ids(report, locale, store=store)
audit = report["audits"]["modern-image-formats"]
print(audit["title"])
print(audit["displayValue"])
print(report["timing"]["total"])
for path, entry in paths.items():
    print(f"  {path} <- {entry['id']}")
# Output:
# Bilder in modernen Formaten bereitstellen
# 1.200 Bilder gefunden
# 5,2 s
#   audits[modern-image-formats].title <- quickstart.py | title
#   ...

# Example 3: Strings and errors
print("\n" + "=" * 50)
print("Example 3: Plain Strings and Errors")
print("=" * 50)

print(get_formatted("Already localized", "es", store=store))
try:
    format_icu_message("en", str_(UI_STRINGS["ms"]), store=store)
except IcuReportError as e:
    print(f"{type(e).__name__}: {e}")
# Output: MissingValueError: ICU Message "{timeInMs, number, milliseconds} ms" contains ...

# Example 4: Renderer strings and validation
print("\n" + "=" * 50)
print("Example 4: Renderer Strings and Validation")
print("=" * 50)

print(get_renderer_formatted_strings("es", store=store)["varianceDisclaimer"])
print(validate_locale_data(store).format())
# Output:
# Los valores son estimaciones y pueden variar.
# Validation passed
