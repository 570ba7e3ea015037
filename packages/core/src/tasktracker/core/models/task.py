"""Task Domain Model

Task 为不可变模型：解析器与 TaskStore 只能通过构造函数一次性传入
五个字段完成组装，字段变更通过 model_copy 生成新实例。
"""

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_TASK_ID
from .enums import ListFilter, TaskStatus


class Task(BaseModel):
    """Task 数据模型

    时间戳为不透明字符串，格式由时钟协作者决定。
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, le=MAX_TASK_ID, description="唯一标识，创建后不可变")
    description: str = Field(min_length=1, description="任务描述")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="当前状态")
    created_at: str = Field(min_length=1, description="创建时间")
    updated_at: str = Field(min_length=1, description="更新时间")


class TaskListing(BaseModel):
    """list 查询结果"""

    filter: ListFilter = Field(default=ListFilter.ALL, description="筛选键")
    tasks: list[Task] = Field(default_factory=list, description="按集合顺序命中的任务")

    @property
    def is_empty(self) -> bool:
        return not self.tasks

    @property
    def empty_message(self) -> str:
        """空结果提示，all 与具体状态的措辞不同"""
        if self.filter is ListFilter.ALL:
            return "No tasks found."
        return f"No tasks found with status '{self.filter}'."
