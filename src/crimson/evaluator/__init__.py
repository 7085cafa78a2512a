# src/crimson/evaluator/__init__.py
from .core import Executor, execute
from .utils import EVAL_SUMMARY

__all__ = ['Executor', 'execute', 'EVAL_SUMMARY']
