"""Build the LangGraph keypad graph."""
from typing import Iterable, Optional
from langgraph.graph import StateGraph, END, START
from src.config import TRACE_ENABLED
from src.engine.state import GraphState, State, KeyEvent, build_initial_state, session_state
from src.engine.registry import load_transitions
from src.observability.telemetry import log_transition


def _as_node(transition):
    def node(state: GraphState) -> State:
        return transition(session_state(state), state["event"])
    node.__name__ = transition.__name__
    return node


def route_event(state: GraphState) -> str:
    """Route to the node handling the pending key."""
    return state["event"].kind.value


def build_graph():
    """Build and return the compiled keypad graph: one node per key kind."""
    graph = StateGraph(GraphState)

    transitions = load_transitions()
    for kind, transition in transitions.items():
        graph.add_node(kind.value, _as_node(transition))
        graph.add_edge(kind.value, END)

    graph.add_conditional_edges(
        START, route_event, {kind.value: kind.value for kind in transitions})

    return graph.compile()


def replay(events: Iterable[KeyEvent], state: Optional[State] = None, graph=None,
           trace: Optional[bool] = None) -> State:
    """Run a tape of key events through the graph, one invocation per key."""
    graph = graph or build_graph()
    state = state or build_initial_state()
    trace = TRACE_ENABLED if trace is None else trace
    for event in events:
        result = session_state(graph.invoke({**state, "event": event}))
        if trace:
            log_transition(event, state, result)
        state = result
    return state
