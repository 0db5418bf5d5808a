safe_claim_prompt = """Atomically claim a task with file locking. Rejects if already claimed, in_progress, or completed.

Use this before starting work on any task so that two agents never pick up the same one.

Parameters:
- task_id: Task ID to claim
- owner: Agent name claiming the task
- team: Team name (defaults to the first directory in the tasks directory, in lexicographic order)

Returns a single line:
- "Claimed task <id>: <subject>" on success
- "Error: <reason>" otherwise, e.g. "Error: already claimed by agent-alpha"

An "Error: already claimed ..." result is normal contention: pick another task instead of retrying.
"""

server_instructions = (
    "Safe task claiming with file locking. Use safe_claim before starting work on any task "
    "to prevent race conditions."
)
