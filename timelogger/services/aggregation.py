# timelogger/services/aggregation.py
"""
Tracked-time figures derived from a loaded Project → Task → Subtask →
TimeRecord graph.

Nothing here is persisted. Every value is recomputed from the time records
on each read, so the functions only need objects exposing the relevant
attributes (ORM rows or plain stand-ins alike).
"""
from collections import defaultdict
from datetime import timedelta
from typing import Any, Dict, List

MILLISECOND = timedelta(milliseconds=1)

def record_duration(record: Any) -> timedelta:
    return record.end_time - record.start_time

def record_tracked_millis(record: Any) -> int:
    """Whole milliseconds between start and end; sub-millisecond remainders are dropped."""
    return record_duration(record) // MILLISECOND

def own_tracked_millis(task: Any) -> int:
    return sum(record_tracked_millis(r) for r in (task.time_records or []))

def task_tracked_millis(task: Any) -> int:
    """
    Own time plus the time of direct subtasks. Subtasks cannot have
    subtasks of their own, so this never goes deeper than one level.
    """
    total = own_tracked_millis(task)
    for subtask in task.subtasks or []:
        total += task_tracked_millis(subtask)
    return total

def project_tracked_millis(project: Any) -> int:
    # Subtask time is already folded into the parent's total.
    return sum(task_tracked_millis(t) for t in (project.tasks or []) if t.parent_task_id is None)

def time_by_date(project: Any) -> List[Dict[str, Any]]:
    """
    Every time record of the project (tasks and subtasks, each record once)
    summed per calendar day of its start time, newest day first.
    """
    records = {}
    for task in project.tasks or []:
        for record in task.time_records or []:
            records[record.time_record_id] = record
        for subtask in task.subtasks or []:
            for record in subtask.time_records or []:
                records[record.time_record_id] = record

    totals: Dict[Any, int] = defaultdict(int)
    for record in records.values():
        totals[record.start_time.date()] += record_tracked_millis(record)

    return [{"date": day, "time": totals[day]} for day in sorted(totals, reverse=True)]
