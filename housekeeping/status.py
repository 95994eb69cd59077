from frontdesk.transitions import TransitionTable
from housekeeping.models import HousekeepingTask

TaskStatus = HousekeepingTask.TaskStatus

# Forward only: pending -> in-progress -> completed.
TASK_TRANSITIONS = TransitionTable(
    "Task",
    {
        TaskStatus.PENDING: (TaskStatus.IN_PROGRESS,),
        TaskStatus.IN_PROGRESS: (TaskStatus.COMPLETED,),
        TaskStatus.COMPLETED: (),
    },
    messages={
        TaskStatus.PENDING: "A task cannot return to pending.",
        TaskStatus.IN_PROGRESS: "Only pending tasks can be started.",
        TaskStatus.COMPLETED: "Only tasks in progress can be completed.",
    },
)
