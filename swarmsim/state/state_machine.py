"""Finite state machine with validated transitions.

Both the operational state of a unit and the lifecycle of a mission run on
this machine: the owner declares, for every state, the actions allowed from
it. Each action names a target state and may carry an effect that runs once
the transition is committed.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

State = TypeVar("State", bound=Enum)
"""Type variable for the enum of states driven by a machine."""

ActionFn = Callable[..., Any]

StateGraph = dict[Enum, Iterable["Action"]]
"""Mapping from each state to the actions allowed from it."""


@dataclass(frozen=True)
class Action:
    """A permitted transition toward ``state``.

    Attributes:
        state: Target state.
        effect: Optional callable run after the machine has entered ``state``.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """Holds the current state and enforces the transition graph.

    Attributes:
        _state: Current state.
        _allowed: Transition graph.
        _name: Label used in log lines.
    """

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph, name: str = ""):
        """Create a machine sitting in ``initial_state``.

        Args:
            initial_state: Starting state.
            nodes_graph: Allowed actions for each state. States missing from
                the graph are terminal.
            name: Owner label for log lines.
        """
        self._state = initial_state
        self._allowed = {state: tuple(actions) for state, actions in nodes_graph.items()}
        self._name = name

    @property
    def current(self) -> Enum:
        return self._state

    def can_transition(self, next_state: Enum) -> bool:
        """Tell whether ``next_state`` is reachable in one step."""
        return self._find_action(self._state, next_state) is not None

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the action's effect.

        Args:
            next_state: Target state.
            *args: Forwarded to the effect.
            **kwargs: Forwarded to the effect.

        Returns:
            Whatever the effect returns, or None.

        Raises:
            ValueError: If the graph does not allow the transition.
        """
        action = self._validate_transition(self._state, next_state)
        previous = self._state
        self._state = action.state
        logger.debug("%s: %s -> %s", self._name or "machine", previous.name, action.state.name)
        return action(*args, **kwargs)

    def force(self, state: Enum) -> None:
        """Set the state without consulting the graph.

        Reserved for external repair of a unit, which may bring it back from
        any state.
        """
        logger.debug("%s: forced %s -> %s", self._name or "machine", self._state.name, state.name)
        self._state = state

    def _find_action(self, frm: Enum, to: Enum) -> Action | None:
        for action in self._allowed.get(frm, ()):
            if action.state == to:
                return action
        return None

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        action = self._find_action(frm, to)
        if action is None:
            msg = f"Illegal transition {frm.name} -> {to.name}"
            raise ValueError(msg)
        return action
