"""
Markdown Normalizer - turns raw VitePress markdown into display-ready text.

Steps (in order):
- Strip leading front matter
- Remove Vue component tags (<Tag ...>, </Tag>, <Tag />)
- Remove {{ interpolations }}
- Fold ::: tip/warning/danger/info containers into blockquotes
- Trim surrounding whitespace

The pass is repeated until the text stops changing, so normalizing
already-normalized text is a no-op.
"""

import re

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n(?:.*?\n)?---[ \t]*(?:\n|\Z)", re.DOTALL)
_COMPONENT_TAG_RE = re.compile(r"<[A-Z][\w.-]*(?:\s[^<>]*)?/?>")
_COMPONENT_CLOSE_RE = re.compile(r"</[A-Z][\w.-]*\s*>")
_INTERPOLATION_RE = re.compile(r"\{\{.*?\}\}")
_CONTAINER_RE = re.compile(
	r"^:::[ \t]*(?:tip|warning|danger|info)\b[^\n]*\n(.*?)^:::[ \t]*$",
	re.MULTILINE | re.DOTALL,
)

def strip_frontmatter(text: str) -> str:
	"""Remove a leading '---' delimited metadata block, if present."""
	return _FRONTMATTER_RE.sub("", text, count=1)


def strip_components(text: str) -> str:
	"""Remove component-style tags whose name starts with an uppercase letter."""
	text = _COMPONENT_TAG_RE.sub("", text)
	return _COMPONENT_CLOSE_RE.sub("", text)


def strip_interpolations(text: str) -> str:
	return _INTERPOLATION_RE.sub("", text)


def _container_to_quote(match: re.Match) -> str:
	body = match.group(1)
	if body.endswith("\n"):
		body = body[:-1]
	return "\n".join(f"> {line}" for line in body.split("\n"))


def fold_containers(text: str) -> str:
	"""Convert '::: tip' style containers into '> ' quoted lines."""
	return _CONTAINER_RE.sub(_container_to_quote, text)


def _clean_once(text: str) -> str:
	text = text.replace("\r\n", "\n")
	text = strip_frontmatter(text)
	text = strip_components(text)
	text = strip_interpolations(text)
	text = fold_containers(text)
	return text.strip()


def normalize_markdown(raw: str) -> str:
	"""
	Normalize raw markdown for display.

	Never raises: input that doesn't match any rule passes through trimmed.

	Args:
		raw: Markdown as served by the documentation repository

	Returns:
		Cleaned markdown
	"""
	text = raw
	# Terminates: folding drops colons, every other rule only deletes text
	while True:
		cleaned = _clean_once(text)
		if cleaned == text:
			return text
		text = cleaned
