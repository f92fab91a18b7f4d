DEFAULT_LANGUAGE = "typescript"

__version__ = "0.1.0"
__author__ = "PsiACE"
__author_email__ = "psiace@apache.org"
__copyright__ = f"Copyright (c) 2026, {__author__}."
__homepage__ = "https://github.com/psiace/docsmoke"
__docs__ = "Run provider documentation snippets in a remote sandbox."

__all__ = [
    "DEFAULT_LANGUAGE",
    "__author__",
    "__author_email__",
    "__copyright__",
    "__docs__",
    "__homepage__",
    "__version__",
]
