"""kbdwrap: a small markdown editor that toggles <kbd> tags around selections."""
