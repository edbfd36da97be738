"""Catalog of known Botsify bot settings.

Each entry carries the exact API key, a short description and the synonym keywords users tend to
say instead of the key. The catalog is built once at import time and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from src.resolver.schema import SettingEntry, SettingType

CATALOG_SCHEMA_VERSION = 2

_B = SettingType.boolean
_C = SettingType.color
_N = SettingType.number
_T = SettingType.text
_U = SettingType.url
_L = SettingType.list
_S = SettingType.secret


class CatalogError(ValueError):
    """Raised when catalog rows cannot form a valid catalog."""


# (key, description, keywords, type)
_CATALOG_ROWS: tuple[tuple[str, str, tuple[str, ...], SettingType | None], ...] = (
    ("website-chatbot-primary-color", "Primary color of the chatbot",
     ("primary color", "chatbot color", "main color"), _C),
    ("website-chatbot-secondary-color", "Secondary color of the chatbot",
     ("secondary color", "alternate color"), _C),
    ("website-chatbot-bot-image", "Image for the chatbot", ("bot image", "chatbot avatar"), _U),
    ("website-chatbot-input-disabled", "Disable chatbot input field",
     ("input disabled", "disable input", "chat input"), _B),
    ("website-chatbot-bot-welcoming-text", "Welcoming text for the chatbot",
     ("welcome text", "greeting message", "chatbot welcome"), _T),
    ("website-chatbot-popup", "Chatbot popup visibility", ("popup", "chatbot popup", "pop-up"), _B),
    ("website-chatbot-loginform", "Login form for the chatbot", ("login form", "sign-in form"), _B),
    ("stripe_account_id", "Stripe account ID for payments", ("stripe id", "payment account"), _T),
    ("access_token", "Access token for API authentication",
     ("access token", "api token", "authentication"), _S),
    ("website-chatbot-preferred-language", "Preferred language for the chatbot",
     ("language", "chatbot language", "preferred language"), _T),
    ("website-chatbot-default-launcher", "Default launcher for the chatbot",
     ("launcher", "chatbot launcher", "default launcher"), _T),
    ("website-chatbot-popup-message", "Message displayed in chatbot popup",
     ("popup message", "chatbot popup text"), _T),
    ("delete-conversation-confirm", "Confirmation for deleting conversations",
     ("delete conversation", "conversation confirm"), _B),
    ("has_sound", "Enable or disable sound for the chatbot", ("sound", "audio", "chatbot sound"), _B),
    ("website-chatbot-bot-image-url", "URL for the chatbot image",
     ("bot image url", "chatbot image link"), _U),
    ("human-help-form", "Form for requesting human help", ("human help", "support form"), _B),
    ("website-chatbot-move-left", "Move chatbot to the left side",
     ("move left", "chatbot position"), _B),
    ("website-chatbot-icon-type", "Type of icon used for the chatbot",
     ("icon type", "chatbot icon"), _T),
    ("translate_client", "Client translation settings", ("translate", "client translation"), _B),
    ("website-chatbot-menu-languages", "Languages available in the chatbot menu",
     ("menu languages", "chatbot languages"), _L),
    ("broadcast_labels", "Labels for broadcast messages", ("broadcast labels", "message labels"), _L),
    ("website-chatbot-composer-buttons", "Buttons in the chatbot composer",
     ("composer buttons", "chatbot buttons"), _L),
    ("wizard_page", "Wizard page settings", ("wizard page", "setup page"), _T),
    ("landing-bot-bg-image", "Background image for landing bot",
     ("landing background", "bot background"), _U),
    ("language", "General language setting", ("language", "site language"), _T),
    ("icon-as-get-started", "Use icon as get started button", ("get started icon", "start button"), _B),
    ("top-close-chat", "Close chat button at the top", ("close chat", "top close button"), _B),
    ("show-chat-human-help", "Show human help option in chat", ("human help", "chat support"), _B),
    ("landing-bot-bg-style", "Background style for landing bot",
     ("landing style", "background style"), _T),
    ("website-chatbot-popup-once", "Show chatbot popup only once", ("popup once", "single popup"), _B),
    ("whitelabel-type", "Whitelabel type for branding", ("whitelabel", "branding type"), _T),
    ("website-chatbot-speech-button", "Speech button for chatbot",
     ("speech button", "voice input"), _B),
    ("website-chatbot-attachment-button", "Attachment button for chatbot",
     ("attachment button", "file upload"), _B),
    ("website-chatbot-calender-disabled", "Disable calendar in chatbot",
     ("calendar disabled", "disable calendar"), _B),
    ("website-chatbot-height", "Height of the chatbot window",
     ("chatbot height", "window height"), _N),
    ("chat-delete-completely", "Completely delete chat data", ("delete chat", "clear chat"), _B),
    ("website-track-users", "Track users on the website", ("track users", "user tracking"), _B),
    ("mobile-hide-chatbot", "Hide chatbot on mobile devices", ("hide chatbot", "mobile hide"), _B),
    ("mobile-no-chatbot-popup", "Disable chatbot popup on mobile",
     ("no popup mobile", "mobile popup"), _B),
    ("mobile-chatbot-height", "Height of chatbot on mobile",
     ("mobile height", "chatbot mobile height"), _N),
    ("inline-form-field-responses", "Responses for inline form fields",
     ("form responses", "inline form"), _B),
    ("excluded-urls", "URLs excluded from chatbot", ("excluded urls", "block urls"), _L),
    ("website-chatbot-get-started", "Get started settings for chatbot",
     ("get started", "chatbot start"), _T),
    ("website-chatbot-btn-border-color", "Border color for chatbot buttons",
     ("button border color", "btn border"), _C),
    ("website-chatbot-btn-padding", "Padding for chatbot buttons", ("button padding", "btn padding"), _N),
    ("website-chatbot-btn-border-width", "Border width for chatbot buttons",
     ("button border width", "btn border width"), _N),
    ("website-chatbot-btn-bg-color", "Background color for chatbot buttons",
     ("button background", "btn bg color"), _C),
    ("website-chatbot-font-size", "Font size for chatbot text", ("font size", "chatbot text size"), _N),
    ("website-chatbot-btn-text-color", "Text color for chatbot buttons",
     ("button text color", "btn text color"), _C),
    ("website-chatbot-btn-qr-inline", "Inline QR code for chatbot buttons", ("qr code", "button qr"), _B),
    ("website-chatbot-btn-style", "Style for chatbot buttons", ("button style", "btn style"), _T),
    ("website-chatbot-font-family", "Font family for chatbot text", ("font family", "chatbot font"), _T),
    ("website-chatbot-user-says-bg", "Background for user messages",
     ("user message background", "user says bg"), _C),
    ("website-chatbot-bot-says-bg", "Background for bot messages",
     ("bot message background", "bot says bg"), _C),
    ("website-chatbot-user-says-color", "Text color for user messages",
     ("user message color", "user says color"), _C),
    ("website-chatbot-btn-mt", "Margin top for chatbot buttons", ("button margin", "btn margin top"), _N),
    ("website-chatbot-home-message-color", "Color for chatbot home message",
     ("home message color", "welcome color"), _C),
    ("login-form-logo", "Logo for login form", ("login logo", "form logo"), _U),
    ("get-started-title", "Title for get started section", ("get started title", "start title"), _T),
    ("website-chatbot-qr-usr-custom-bg", "Custom background for QR code",
     ("qr background", "custom qr bg"), _C),
    ("excluded-ips", "IP addresses excluded from chatbot", ("excluded ips", "block ips"), _L),
    ("website-chatbot-header-gradient", "Gradient for chatbot header",
     ("header gradient", "chatbot header"), _B),
    ("website-chatbot-rounded-blocks", "Rounded blocks for chatbot UI",
     ("rounded blocks", "chatbot ui"), _B),
    ("website-chatbot-text-color", "Text color for chatbot", ("text color", "chatbot text"), _C),
    ("search-for-chinese-keywords", "Search settings for Chinese keywords",
     ("chinese search", "keyword search"), _B),
    ("bot-activation-time", "Activation time for the bot", ("activation time", "bot start time"), _T),
    ("previous_story_attribute", "Previous story attributes for bot",
     ("story attribute", "previous story"), _T),
    ("interactive_activation", "Interactive activation settings",
     ("interactive activation", "bot activation"), _B),
    ("customer-support-bot", "Customer support bot settings", ("customer support", "support bot"), _B),
    ("bot-daily-limit-users", "Daily user limit for the bot", ("daily limit", "user limit"), _N),
    ("block-bot-user", "Block specific bot users", ("block user", "bot user block"), _L),
    ("bot-preg-match", "Pattern matching for bot", ("pattern match", "bot regex"), _T),
    ("form-submission-attributes", "Attributes for form submissions",
     ("form attributes", "submission attributes"), _L),
    ("translation-source-language", "Source language for translations",
     ("source language", "translation language"), _T),
    ("admin-invitaion-email", "Admin invitation email settings", ("admin email", "invitation email"), _T),
    ("user-company-name", "Company name for users", ("company name", "user company"), _T),
    ("notification-to-all-agents", "Notifications sent to all agents",
     ("agent notifications", "all agents"), _B),
    ("whatsapp_daily_limit", "Daily message limit for WhatsApp", ("whatsapp limit", "daily limit"), _N),
    ("whatsapp_monthly_limit", "Monthly message limit for WhatsApp",
     ("whatsapp monthly", "monthly limit"), _N),
    ("website-chatbot-bot-name", "Name of the chatbot", ("bot name", "chatbot name"), _T),
    ("website-chatbot-home-message", "Home message for the chatbot",
     ("home message", "welcome message"), _T),
    ("website-chatbot-bot-email", "Email address for the chatbot", ("bot email", "chatbot email"), _T),
    # Misspelled key kept as-is: the API stores it under this name.
    ("industory", "Industry setting (likely a typo for industry)", ("industry", "business type"), _T),
    ("whatsapp-human-help", "Human help option for WhatsApp", ("whatsapp help", "human support"), _B),
    ("website-chatbot-header-solid", "Solid header for chatbot", ("header solid", "chatbot header"), _B),
    ("industry", "Industry setting for the bot", ("industry", "business sector"), _T),
    ("live_chat_order", "Order of live chat messages", ("live chat order", "chat order"), _T),
    ("wizard_id", "ID for the setup wizard", ("wizard id", "setup id"), _T),
    ("page-message-sound", "Sound for page messages", ("message sound", "page sound"), _B),
    ("csat-settings-enabled", "Enable CSAT settings", ("csat", "customer satisfaction"), _B),
    ("trending_queries", "Trending queries for the bot", ("trending queries", "popular queries"), _L),
    ("website-chatbot-start-conversation-title", "Title for starting a conversation",
     ("conversation title", "start title"), _T),
    ("website-chatbot-start-conversation-subtitle", "Subtitle for starting a conversation",
     ("conversation subtitle", "start subtitle"), _T),
    ("publish-to-ai", "Publish settings to AI", ("publish ai", "ai settings"), _B),
    ("open-ai-key", "API key for Open AI integration", ("open ai key", "ai key"), _S),
    ("scroll-bar-enabled", "Enable scrollbar in chatbot", ("scrollbar", "chatbot scrollbar"), _B),
    ("delete-user-conversation-on-get-started", "Delete user conversation on get started",
     ("delete conversation", "clear on start"), _B),
    ("failure_through_sms", "SMS failure notifications", ("sms failure", "failure notification"), _B),
)


def build_catalog(entries: Iterable[SettingEntry | dict]) -> tuple[SettingEntry, ...]:
    """Validate entries into an immutable catalog.

    Raises:
        CatalogError: If an entry is invalid or a key appears twice.
    """

    catalog: list[SettingEntry] = []
    seen: set[str] = set()
    for raw in entries:
        try:
            entry = raw if isinstance(raw, SettingEntry) else SettingEntry.model_validate(raw)
        except ValidationError as exc:
            raise CatalogError(f"invalid catalog entry: {exc}") from exc
        if entry.key in seen:
            raise CatalogError(f"duplicate catalog key: {entry.key}")
        seen.add(entry.key)
        catalog.append(entry)
    return tuple(catalog)


SETTING_CATALOG: tuple[SettingEntry, ...] = build_catalog(
    {"key": key, "description": description, "keywords": keywords, "type": setting_type}
    for key, description, keywords, setting_type in _CATALOG_ROWS
)


def find_entry(key: str, catalog: Sequence[SettingEntry] = SETTING_CATALOG) -> SettingEntry | None:
    """Return the catalog entry with exactly this key, if any."""

    for entry in catalog:
        if entry.key == key:
            return entry
    return None


def catalog_keys(catalog: Sequence[SettingEntry] = SETTING_CATALOG) -> list[str]:
    """All keys in catalog order."""

    return [entry.key for entry in catalog]
