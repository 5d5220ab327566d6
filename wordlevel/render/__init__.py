"""Render — Display output for validation results."""

from wordlevel.render.highlight import render_html, render_text, to_dict, word_count_label

__all__ = ["render_html", "render_text", "to_dict", "word_count_label"]
