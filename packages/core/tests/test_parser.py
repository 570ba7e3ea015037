"""文档解析单元测试

测试内容：
1. 空文档 / [] / 缺失数组括号
2. 单遍扫描器切分对象（字符串内花括号、嵌套对象、越界对象）
3. 畸形记录隔离：跳过非法记录并继续解析
"""

import pytest
from structlog.testing import capture_logs
from tasktracker.core.codec import iter_object_bodies, parse_document, parse_record
from tasktracker.core.models import Task, TaskStatus


def _obj(
    task_id: str = "1",
    description: str = '"Buy milk"',
    status: str = '"todo"',
    created: str = '"2024-01-01 09:00:00"',
    updated: str = '"2024-01-01 09:00:00"',
) -> str:
    return (
        "{\n"
        f'    "id": {task_id},\n'
        f'    "description": {description},\n'
        f'    "status": {status},\n'
        f'    "createdAt": {created},\n'
        f'    "updatedAt": {updated}\n'
        "  }"
    )


def _doc(*objects: str) -> str:
    return "[\n  " + ",\n  ".join(objects) + "\n]\n"


class TestEmptyDocuments:
    """"尚无任务"的正常状态"""

    @pytest.mark.parametrize("text", ["", "   \n\t ", "[]", "  []  \n", "[\n]\n", "[ ]"])
    def test_zero_records_without_diagnostics(self, text: str):
        """空白、[] 及空数组均返回空列表且无诊断"""
        with capture_logs() as logs:
            assert parse_document(text) == []
        assert [e for e in logs if e["log_level"] != "debug"] == []


class TestArrayBounds:
    """数组括号缺失或错位时整份文档视为损坏"""

    @pytest.mark.parametrize(
        "text",
        [
            _obj(),
            "[" + _obj(),
            _obj() + "]",
            "] " + _obj() + " [",
        ],
    )
    def test_invalid_brackets(self, text: str):
        """缺失或顺序错误的括号返回空列表并记录错误"""
        with capture_logs() as logs:
            assert parse_document(text) == []
        assert logs[0]["event"] == "document_array_brackets_invalid"
        assert logs[0]["log_level"] == "error"


class TestObjectScanner:
    """iter_object_bodies 状态扫描"""

    def test_yields_bodies_without_braces(self):
        """产出花括号之间的内容"""
        text = '[{"a": 1}, {"b": 2}]'
        assert list(iter_object_bodies(text, 1, len(text) - 1)) == ['"a": 1', '"b": 2']

    def test_braces_inside_strings_ignored(self):
        """字符串内的花括号不参与匹配"""
        text = '[{"d": "x { y } z"}]'
        assert list(iter_object_bodies(text, 1, len(text) - 1)) == ['"d": "x { y } z"']

    def test_escaped_quote_keeps_string_state(self):
        """字符串内的 \\\" 不结束字符串"""
        text = '[{"d": "a \\" } b"}]'
        assert list(iter_object_bodies(text, 1, len(text) - 1)) == ['"d": "a \\" } b"']

    def test_nested_object_stops_scan(self):
        """对象内出现 { 时停止后续解析"""
        text = '[{"a": 1}, {"b": {"c": 2}}, {"d": 3}]'
        with capture_logs() as logs:
            bodies = list(iter_object_bodies(text, 1, len(text) - 1))
        assert bodies == ['"a": 1']
        assert logs[0]["event"] == "nested_object_unsupported"

    def test_unterminated_object_stops_scan(self):
        """对象在数组边界前未闭合"""
        text = '[{"a": 1}, {"b": 2 ]'
        with capture_logs() as logs:
            bodies = list(iter_object_bodies(text, 1, text.rfind("]")))
        assert bodies == ['"a": 1']
        assert logs[0]["event"] == "object_extends_beyond_array"


class TestParseRecord:
    """单条记录组装"""

    def test_valid_record(self):
        """五个字段齐全时组装为 Task"""
        task = parse_record(_obj()[1:-1])
        assert task == Task(
            id=1,
            description="Buy milk",
            status=TaskStatus.TODO,
            created_at="2024-01-01 09:00:00",
            updated_at="2024-01-01 09:00:00",
        )

    def test_field_order_irrelevant(self):
        """字段顺序不影响提取"""
        body = (
            '"status": "done", "updatedAt": "u", "description": "d", '
            '"createdAt": "c", "id": 9'
        )
        task = parse_record(body)
        assert task is not None
        assert task.id == 9
        assert task.status is TaskStatus.DONE

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"task_id": '"one"'}, "id"),
            ({"description": '""'}, "description"),
            ({"status": '"blocked"'}, "status"),
            ({"status": '""'}, "status"),
            ({"created": '""'}, "createdAt"),
            ({"updated": "null"}, "updatedAt"),
        ],
    )
    def test_invalid_field_skips_record(self, overrides: dict, field: str):
        """任一字段非法时跳过整条记录，诊断中标明字段"""
        with capture_logs() as logs:
            assert parse_record(_obj(**overrides)[1:-1]) is None
        skipped = [e for e in logs if e["event"] == "task_record_skipped"]
        assert len(skipped) == 1
        assert field in skipped[0]["fields"]

    def test_quoted_id_accepted(self):
        """带引号的纯数字 ID 照常解析"""
        task = parse_record(_obj(task_id='"7"')[1:-1])
        assert task is not None
        assert task.id == 7

    @pytest.mark.parametrize("task_id", ['"1_000"', '" 7"', '"7 "', '"٣"', '"+7"', '"-"'])
    def test_quoted_id_must_be_ascii_digits(self, task_id: str):
        """带引号的 ID 与裸整数同样只接受 ASCII 数字"""
        with capture_logs() as logs:
            assert parse_record(_obj(task_id=task_id)[1:-1]) is None
        assert logs[-1]["event"] == "task_record_skipped"
        assert logs[-1]["fields"] == ["id"]

    def test_diagnostic_carries_partial_id(self):
        """已知 ID 会出现在诊断中"""
        with capture_logs() as logs:
            parse_record(_obj(task_id="5", status='"nope"')[1:-1])
        assert logs[-1]["task_id"] == 5

    @pytest.mark.parametrize("task_id", ["0", "-4", "2147483648"])
    def test_out_of_range_id_skipped(self, task_id: str):
        """ID 必须为正且不超过上限"""
        with capture_logs() as logs:
            assert parse_record(_obj(task_id=task_id)[1:-1]) is None
        assert logs[-1]["event"] == "task_record_skipped"
        assert logs[-1]["fields"] == ["id"]


class TestParseDocument:
    """完整文档解析"""

    def test_multiple_records_in_order(self):
        """按文档顺序返回"""
        text = _doc(_obj("3"), _obj("1", '"Walk dog"', '"done"'))
        tasks = parse_document(text)
        assert [t.id for t in tasks] == [3, 1]
        assert tasks[1].description == "Walk dog"
        assert tasks[1].status is TaskStatus.DONE

    def test_malformed_record_isolated(self):
        """缺少 status 的记录被跳过，后续合法记录照常解析"""
        missing_status = (
            '{"id": 2, "description": "no status", '
            '"createdAt": "c", "updatedAt": "u"}'
        )
        text = _doc(_obj("1"), missing_status, _obj("3"))
        with capture_logs() as logs:
            tasks = parse_document(text)
        assert [t.id for t in tasks] == [1, 3]
        skipped = [e for e in logs if e["event"] == "task_record_skipped"]
        assert len(skipped) == 1
        assert skipped[0]["task_id"] == 2
        assert skipped[0]["fields"] == ["status"]

    def test_nested_object_keeps_earlier_records(self):
        """遇到嵌套对象前已解析的记录保留"""
        nested = '{"id": 2, "meta": {"x": 1}}'
        text = _doc(_obj("1"), nested, _obj("3"))
        with capture_logs() as logs:
            tasks = parse_document(text)
        assert [t.id for t in tasks] == [1]
        assert any(e["event"] == "nested_object_unsupported" for e in logs)

    def test_duplicate_id_dropped(self):
        """重复 ID 只保留第一条"""
        text = _doc(_obj("1"), _obj("1", '"Other"'))
        with capture_logs() as logs:
            tasks = parse_document(text)
        assert len(tasks) == 1
        assert tasks[0].description == "Buy milk"
        assert any(e["event"] == "duplicate_task_id" for e in logs)

    def test_compact_document(self):
        """无换行的紧凑格式同样可解析"""
        text = (
            '[{"id":1,"description":"a","status":"todo",'
            '"createdAt":"c","updatedAt":"u"}]'
        )
        assert [t.id for t in parse_document(text)] == [1]

    def test_description_containing_braces_and_brackets(self):
        """描述中的 { } [ ] 不影响切分"""
        text = _doc(_obj("1", '"fix [bug] in {module}"'), _obj("2"))
        tasks = parse_document(text)
        assert [t.description for t in tasks] == ["fix [bug] in {module}", "Buy milk"]
