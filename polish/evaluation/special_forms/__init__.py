"""Registry of lazy builtins for the Polish evaluator.

Maps names to (arity, handler). Handlers receive the unevaluated argument
expressions plus the evaluator, and decide which of them to evaluate.
"""

from polish.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "if": (3, if_form),
}
