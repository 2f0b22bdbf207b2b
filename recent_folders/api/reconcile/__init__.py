"""Reconciliation pass: collect, rank, rebuild."""

from .ReconcileResult import ReconcileResult
from .reconcile_once import reconcile_once

__all__ = ["ReconcileResult", "reconcile_once"]
