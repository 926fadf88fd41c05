from selkit.selector.facade import SelectorFacade, css_selector_builder
from selkit.selector.model import Combinator, FragmentKind

__all__ = ["SelectorFacade", "css_selector_builder", "Combinator", "FragmentKind"]
