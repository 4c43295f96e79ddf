"""Registry of special forms for the steel evaluator.

Maps identifier text to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary function
application. A handler receives the unevaluated operands, the current
environment and the evaluator, and returns either a value or a TailCall for
the trampoline to continue with.
"""

from steel.evaluation.special_forms.quote_form import quote_form
from steel.evaluation.special_forms.if_form import if_form
from steel.evaluation.special_forms.define_form import define_form
from steel.evaluation.special_forms.lambda_form import lambda_form
from steel.evaluation.special_forms.eval_form import eval_form
from steel.evaluation.special_forms.set_form import set_form
from steel.evaluation.special_forms.let_form import let_form
from steel.evaluation.special_forms.progn_form import begin_form
from steel.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "define": define_form,
    "lambda": lambda_form,
    "λ": lambda_form,
    "eval": eval_form,
    "set!": set_form,
    "let": let_form,
    "begin": begin_form,
    "and": and_form,
    "or": or_form,
}
