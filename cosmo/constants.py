"""Constants and configuration for the cosmo editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Buffer
    NEW_LINE_PLACEHOLDER = " "  # Content of lines created by Enter or seeding
    WELCOME_TEXT = "Welcome to Cosmo! Press Tab to start editing this new file."

    # Layout
    BORDER_WIDTH = 2  # One vertical bar on each side of a bordered box
    EDITING_BOX_HEIGHT = 3  # Top border, content row, bottom border
    INFO_BAR_HEIGHT = 1
    TITLE = " Cosmo Text Editor "
    HIGHLIGHT_SYMBOL = ">> "
    LINE_NUMBER_FORMAT = "{number:>3}. {text}"

    # Exit confirmation popup
    EXIT_PROMPT = "Do you want to save your changes?"
    EXIT_OPTIONS = "Yes (Y/y) or No (N/n)"
    POPUP_TITLE = "Popup"

    # Status messages
    SAVED_MESSAGE = "Saved"
    USAGE_MESSAGE = "usage: cosmo [--version] [--keytest] PATH"

    # Logging
    LOG_FILENAME = "cosmo.log"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    DEFAULT_LOG_LEVEL = "WARNING"
