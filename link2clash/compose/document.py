"""
Document Composer
=================
Deterministic template that wraps the two engine outputs (proxy entries and
group references) into a complete, correctly indented configuration document.

The composer never parses the lines it receives; it only splits them on
newlines and re-indents them.
"""

from __future__ import annotations

DEFAULT_GROUP_NAME = "PROXY"
ENTRY_INDENT = " " * 2
GROUP_MEMBER_INDENT = " " * 6

FALLBACK_MEMBERS = ("- DIRECT", "- REJECT")

ROUTING_RULES = (
    "- DOMAIN-SUFFIX,local,DIRECT",
    "- IP-CIDR,127.0.0.0/8,DIRECT",
    "- IP-CIDR,10.0.0.0/8,DIRECT",
    "- IP-CIDR,172.16.0.0/12,DIRECT",
    "- IP-CIDR,192.168.0.0/16,DIRECT",
    "- GEOIP,CN,DIRECT",
)


def _group_header(group_name: str) -> list[str]:
    return [
        "proxy-groups:",
        f'  - name: "{group_name}"',
        "    type: select",
        "    proxies:",
    ]


def _rules_block(group_name: str) -> list[str]:
    lines = ["rules:"]
    lines.extend(ENTRY_INDENT + rule for rule in ROUTING_RULES)
    lines.append(f"{ENTRY_INDENT}- MATCH,{group_name}")
    return lines


def placeholder_document(group_name: str = DEFAULT_GROUP_NAME) -> str:
    """Guidance document shown before the first successful conversion."""
    lines = [
        "# Paste one proxy link per line and press Convert.",
        "# This document is rebuilt once both the proxies and the",
        "# proxy-group outputs are available.",
        "proxies:",
        f"{ENTRY_INDENT}# - {{name: example, type: vmess, server: example.com, port: 443}}",
        "",
    ]
    lines.extend(_group_header(group_name))
    lines.append(f'{GROUP_MEMBER_INDENT}# - "example"')
    lines.extend(GROUP_MEMBER_INDENT + member for member in FALLBACK_MEMBERS)
    lines.append("")
    lines.extend(_rules_block(group_name))
    return "\n".join(lines) + "\n"


class DocumentComposer:
    """
    Pure builder for the composed configuration document.

    Example:
        composer = DocumentComposer()
        text = composer.compose("- {name: a, ...}", '- "a"')
        original = composer.reset()
    """

    def __init__(self, group_name: str = DEFAULT_GROUP_NAME):
        self.group_name = group_name
        self._placeholder = placeholder_document(group_name)

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def compose(self, entries_text: str, group_ref_text: str) -> str:
        """
        Build a populated document.

        Lines are split on newline boundaries without trimming or filtering,
        so an empty input yields a single indented empty line.

        Args:
            entries_text: Newline-joined proxy entry lines
            group_ref_text: Newline-joined group-reference lines

        Returns:
            Full document text
        """
        lines = ["proxies:"]
        lines.extend(ENTRY_INDENT + line for line in entries_text.split("\n"))
        lines.append("")
        lines.extend(_group_header(self.group_name))
        lines.extend(GROUP_MEMBER_INDENT + line for line in group_ref_text.split("\n"))
        lines.extend(GROUP_MEMBER_INDENT + member for member in FALLBACK_MEMBERS)
        lines.append("")
        lines.extend(_rules_block(self.group_name))
        return "\n".join(lines) + "\n"

    def reset(self) -> str:
        """Return the placeholder document captured at construction."""
        return self._placeholder
