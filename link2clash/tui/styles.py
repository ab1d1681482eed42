"""
Centralized Textual CSS for the terminal UI.
"""

from link2clash.tui.theme import (
    BLACK,
    CHARCOAL_GRAY,
    CORAL_PINK,
    DARK_GRAY,
    OFF_WHITE,
    ORANGE,
    TEAL_GREEN,
)


APP_CSS = """
Screen {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
}
#root {
    height: 1fr;
    layout: vertical;
    background: %(DARK_GRAY)s;
}
#actions {
    height: auto;
    border: heavy %(ORANGE)s;
    margin: 1 1 0 1;
    padding: 0 1;
    background: %(CHARCOAL_GRAY)s;
}
#panes {
    height: 1fr;
    margin: 0 1;
}
#input-pane, #output-pane, #document-pane {
    border: solid %(ORANGE)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 0 1;
    margin-right: 1;
    width: 1fr;
}
#document-pane {
    margin-right: 0;
}
#input, #document {
    height: 1fr;
}
#proxies, #groups {
    height: 1fr;
    min-height: 4;
}
#errors {
    border: solid %(CORAL_PINK)s;
    max-height: 10;
}
#error-rows {
    color: %(CORAL_PINK)s;
}
#status {
    dock: bottom;
    height: 1;
    padding: 0 2;
    color: %(BLACK)s;
    background: %(TEAL_GREEN)s;
}
.label {
    color: %(ORANGE)s;
    text-style: bold;
}
Button {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
    border: solid %(ORANGE)s;
    margin-right: 1;
}
Button.-primary {
    color: %(BLACK)s;
    background: %(ORANGE)s;
}
Button#clear {
    border: solid %(CORAL_PINK)s;
    color: %(CORAL_PINK)s;
}
""" % {
    "BLACK": BLACK,
    "DARK_GRAY": DARK_GRAY,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "ORANGE": ORANGE,
    "TEAL_GREEN": TEAL_GREEN,
    "CORAL_PINK": CORAL_PINK,
    "OFF_WHITE": OFF_WHITE,
}
