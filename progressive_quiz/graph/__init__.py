"""LangGraph workflow and state management."""

# Note: workflow is not imported here so that state can be used without langgraph
# Import the workflow directly as needed:
# from progressive_quiz.graph.workflow import compile_workflow, generate_progressive_quiz

from .state import ProgressiveQuizState, create_initial_state

__all__ = [
    "ProgressiveQuizState",
    "create_initial_state",
]
