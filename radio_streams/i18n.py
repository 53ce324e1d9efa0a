# i18n.py
import locale

MESSAGES = {
    "en": {
        "loading_streams": "Loading radio streams from '{directory}'...",
        "streams_loaded": "{count} stations loaded.",
        "check_passed": "{count} stations found in {files} playlist file(s).",
        "error": "Error",
        "column_name": "Name",
        "column_url": "URL",
        "table_title": "Radio stations",
        "help_directory": "Directory containing the .m3u playlist files.",
        "help_config": "YAML configuration file.",
        "help_json": "Print the catalog as JSON.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
    },
    "fr": {
        "loading_streams": "Chargement des flux radio depuis '{directory}'...",
        "streams_loaded": "{count} stations chargées.",
        "check_passed": "{count} stations trouvées dans {files} fichier(s) de playlist.",
        "error": "Erreur",
        "column_name": "Nom",
        "column_url": "URL",
        "table_title": "Stations de radio",
        "help_directory": "Dossier contenant les fichiers de playlist .m3u.",
        "help_config": "Fichier de configuration YAML.",
        "help_json": "Afficher le catalogue au format JSON.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
    },
}

_current_lang = "en"


def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"


def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"


def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        return f"Formatting error for key '{key}': missing placeholder {e}"


# Initialize with default system language
set_lang(get_default_lang())
