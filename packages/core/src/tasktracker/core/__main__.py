"""CLI 入口模块 -- python -m tasktracker.core <command>

支持的命令：
  add / update / delete         增删改任务
  mark-todo / mark-in-progress / mark-done  设置任务状态
  list [all|todo|in-progress|done]          列出任务
  help                          打印用法
"""

import sys

import structlog

from .commands import CommandResult, TaskCommands
from .config import load_config
from .exceptions import TaskTrackerError, UsageError
from .logging_config import setup_logging
from .models.enums import ListFilter, TaskStatus
from .store import create_file_store

log = structlog.get_logger()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

USAGE = """
Usage: task-cli <command> [options]

Commands:
  add <"description">               Add a new task (use quotes for descriptions with spaces)
  update <id> <"description">       Update task description (use quotes)
  delete <id>                       Delete a task by ID
  mark-in-progress <id>             Mark task as 'in-progress'
  mark-done <id>                    Mark task as 'done'
  mark-todo <id>                    Mark task as 'todo'
  list [all|todo|in-progress|done]  List tasks (default: all)
  help                              Show this help message

Example:
  task-cli add "Submit project report"
  task-cli list todo
  task-cli mark-in-progress 1

Environment:
  TASKTRACKER_TASKS_FILE   Path of the tasks file (default: ./tasks.json)

Notes:
  New IDs are one more than the highest ID in the tasks file. Deleting the
  task with the highest ID lets a later 'add' reuse that ID.
"""

MARK_COMMANDS: dict[str, TaskStatus] = {
    "mark-todo": TaskStatus.TODO,
    "mark-in-progress": TaskStatus.IN_PROGRESS,
    "mark-done": TaskStatus.DONE,
}


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise UsageError(
            "Invalid number format provided for task ID. Please use an integer."
        ) from None


def _expect_args(command: str, args: list[str], count: int, what: str) -> None:
    if len(args) != count:
        raise UsageError(f"'{command}' command requires {what}.")


def dispatch(commands: TaskCommands, command: str, args: list[str]) -> CommandResult:
    """将命令名与参数分派到 TaskCommands

    Raises:
        UsageError: 未知命令、参数个数错误或 ID 非整数
    """
    if command == "add":
        _expect_args(command, args, 1, "exactly one argument (description)")
        return commands.add(args[0])

    if command == "update":
        _expect_args(command, args, 2, "two arguments (id, description)")
        return commands.update(_parse_id(args[0]), args[1])

    if command == "delete":
        _expect_args(command, args, 1, "one argument (id)")
        return commands.delete(_parse_id(args[0]))

    if command in MARK_COMMANDS:
        _expect_args(command, args, 1, "one argument (id)")
        return commands.mark(_parse_id(args[0]), MARK_COMMANDS[command])

    if command == "list":
        if len(args) > 1:
            raise UsageError("'list' command takes at most one argument (filter).")
        filter_value = args[0] if args else ListFilter.ALL.value
        if filter_value not in {f.value for f in ListFilter}:
            raise UsageError(
                f"Invalid filter '{filter_value}'. "
                "Use 'all', 'todo', 'in-progress', or 'done'."
            )
        return commands.list(filter_value)

    raise UsageError(f"Unknown command '{command}'.")


def run(argv: list[str]) -> int:
    """执行单条命令并返回退出码"""
    if not argv or argv[0] in ("help", "--help"):
        print(USAGE)
        return EXIT_FAILURE if not argv else EXIT_SUCCESS

    config = load_config()
    setup_logging(config.log_level, config.log_format)

    try:
        store = create_file_store(config.tasks_file)
        result = dispatch(TaskCommands(store), argv[0], argv[1:])
    except UsageError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        print(USAGE)
        return EXIT_FAILURE
    except TaskTrackerError as e:
        log.error("command_aborted", reason=e.reason.value)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FAILURE

    if result.ok:
        print(result.message)
        return EXIT_SUCCESS
    print(f"Error: {result.message}", file=sys.stderr)
    return EXIT_FAILURE


def main() -> None:
    """CLI 主入口"""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
