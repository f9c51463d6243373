"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("WAITING", not "JobState.WAITING")
- They work as FastAPI request fields and CLI choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobState(str, enum.Enum):
    NOT_ARRIVED = "NOT_ARRIVED"  # still in the arrival sequence
    WAITING = "WAITING"          # admitted to the ready pool
    RUNNING = "RUNNING"          # holding the CPU
    FINISHED = "FINISHED"        # ran for its full duration


class ReadyPoolKind(str, enum.Enum):
    INDEXED = "indexed"  # heap + identity map, O(1) removal by lazy invalidation
    LINEAR = "linear"    # plain heap, O(n) removal by scan + re-heapify
