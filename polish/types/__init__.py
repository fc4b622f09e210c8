"""Data model: symbols, spans, values, expressions, functions and the Environment."""
