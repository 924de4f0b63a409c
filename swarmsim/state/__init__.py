from .state_machine import Action, ActionFn, State, StateGraph, StateMachine

__all__ = ["Action", "ActionFn", "State", "StateGraph", "StateMachine"]
