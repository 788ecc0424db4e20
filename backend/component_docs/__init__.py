"""Static documentation for the prestyled component libraries offered to the model."""

from component_docs.shadcn import SHADCN_DOCS
from component_docs.aceternity import ACETERNITY_DOCS

__all__ = ["SHADCN_DOCS", "ACETERNITY_DOCS"]
