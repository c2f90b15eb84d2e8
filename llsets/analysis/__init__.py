from .nullable import compute_nullable
from .dependency import DependencyGraph, build_dependency_graph
from .scc import Condensation, strongly_connected_components, toposort
from .first import compute_first_sets, propagate_first_sets
from .grammar_analysis import GrammarAnalyzer
