# tests/cli/test_prompts.py
"""
cli/ui/prompts.py 단위 테스트

questionary를 모킹하여 프리미티브의 인자 전달, 취소 처리, 자동완성 후보 계산을 검증합니다.
"""

from unittest.mock import MagicMock, patch

import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.layout.dimension import Dimension
from questionary.prompts.common import InquirerControl

from cli.i18n import t
from cli.ui import prompts
from cli.ui.prompts import (
    AUTOCOMPLETE_PAGE_SIZE,
    SELECT_PAGE_SIZE,
    Choice,
    Prompts,
    SourceCompleter,
    confirm,
    select_one,
    select_one_filtered,
)


def question_returning(value):
    question = MagicMock()
    question.ask.return_value = value
    return question


# =============================================================================
# confirm
# =============================================================================


class TestConfirm:
    """confirm 테스트"""

    def test_default_true_and_prefix(self):
        """기본값 True, 기본 prefix 🤔"""
        with patch("cli.ui.prompts.questionary.confirm", return_value=question_returning(True)) as mock_confirm:
            assert confirm("Continue?") is True

        mock_confirm.assert_called_once_with("Continue?", default=True, qmark="[🤔]")

    def test_custom_prefix(self):
        with patch("cli.ui.prompts.questionary.confirm", return_value=question_returning(False)) as mock_confirm:
            assert confirm("Continue?", prefix="!") is False

        assert mock_confirm.call_args.kwargs["qmark"] == "[!]"

    def test_cancel_raises_keyboard_interrupt(self):
        """Ctrl-C (ask() -> None)는 KeyboardInterrupt"""
        with patch("cli.ui.prompts.questionary.confirm", return_value=question_returning(None)):
            with pytest.raises(KeyboardInterrupt):
                confirm("Continue?")


# =============================================================================
# select_one
# =============================================================================


class TestSelectOne:
    """select_one 테스트"""

    def test_passes_choices_in_order(self):
        """선택지를 순서대로 questionary.Choice로 변환"""
        choices = [Choice("b", 1), Choice("a", 0)]
        with patch("cli.ui.prompts.questionary.select", return_value=question_returning(0)) as mock_select:
            assert select_one("Pick", choices) == 0

        args, kwargs = mock_select.call_args
        assert args == ("Pick",)
        assert [c.title for c in kwargs["choices"]] == ["b", "a"]
        assert [c.value for c in kwargs["choices"]] == [1, 0]
        assert kwargs["qmark"] == "[🔥]"
        assert kwargs["use_search_filter"] is True
        assert kwargs["use_jk_keys"] is False
        assert kwargs["instruction"] == t("flow.filter_footer")

    def test_zero_value_is_not_cancel(self):
        """값 0은 취소가 아님"""
        with patch("cli.ui.prompts.questionary.select", return_value=question_returning(0)):
            assert select_one("Pick", [Choice("only", 0)]) == 0

    def test_empty_choices_rejected(self):
        """빈 목록은 호출자 책임 - ValueError"""
        with patch("cli.ui.prompts.questionary.select") as mock_select:
            with pytest.raises(ValueError):
                select_one("Pick", [])
        mock_select.assert_not_called()

    def test_cancel_raises_keyboard_interrupt(self):
        with patch("cli.ui.prompts.questionary.select", return_value=question_returning(None)):
            with pytest.raises(KeyboardInterrupt):
                select_one("Pick", [Choice("a", "a")])

    def test_caps_visible_rows(self):
        """선택 목록 창 높이를 SELECT_PAGE_SIZE로 제한"""
        list_window = MagicMock()
        list_window.content = MagicMock(spec=InquirerControl)
        other_window = MagicMock()
        other_window.content = MagicMock()
        other_window.height = None

        question = question_returning("a")
        question.application.layout.find_all_windows.return_value = [list_window, other_window]

        with patch("cli.ui.prompts.questionary.select", return_value=question):
            select_one("Pick", [Choice("a", "a")])

        assert isinstance(list_window.height, Dimension)
        assert list_window.height.max == SELECT_PAGE_SIZE == 6
        assert other_window.height is None


# =============================================================================
# select_one_filtered
# =============================================================================


class TestSourceCompleter:
    """SourceCompleter 테스트"""

    def test_calls_source_with_answers_and_input(self):
        source = MagicMock(return_value=["apple", "apricot"])
        completer = SourceCompleter(source, answers={"prev": 1})

        completions = list(completer.get_completions(Document("ap"), None))

        source.assert_called_once_with({"prev": 1}, "ap")
        assert [c.text for c in completions] == ["apple", "apricot"]
        assert all(c.start_position == -2 for c in completions)

    def test_recomputes_on_every_input(self):
        source = MagicMock(side_effect=lambda answers, text: [w for w in ["alpha", "beta"] if text in w])
        completer = SourceCompleter(source)

        assert [c.text for c in completer.get_completions(Document("a"), None)] == ["alpha", "beta"]
        assert [c.text for c in completer.get_completions(Document("be"), None)] == ["beta"]
        assert source.call_count == 2

    def test_no_source_means_no_candidates(self):
        completer = SourceCompleter(None)

        assert list(completer.get_completions(Document("anything"), None)) == []
        assert completer.resolve("anything") == (False, "anything")

    def test_choice_candidates_map_back_to_value(self):
        completer = SourceCompleter(lambda answers, text: [Choice("Web (web-prod)", "web-prod")])

        list(completer.get_completions(Document(""), None))

        assert completer.resolve("Web (web-prod)") == (True, "web-prod")

    def test_only_latest_candidates_resolve(self):
        """이전 입력에서 나온 후보는 더 이상 유효하지 않음"""
        completer = SourceCompleter(lambda answers, text: ["alpha"] if text == "a" else [])

        list(completer.get_completions(Document("a"), None))
        assert completer.resolve("alpha") == (True, "alpha")

        list(completer.get_completions(Document("alpha"), None))
        assert completer.resolve("alpha") == (False, "alpha")

    def test_duplicate_label_uses_first_value(self):
        completer = SourceCompleter(lambda answers, text: [Choice("app", 1), Choice("app", 2)])

        list(completer.get_completions(Document(""), None))

        assert completer.resolve("app") == (True, 1)


class TestSelectOneFiltered:
    """select_one_filtered 테스트"""

    def _run(self, answer, source=None, suggest_only=False, typed=(), answers=None):
        """autocomplete를 모킹하고 전달된 completer/validate를 사용해 입력을 흉내냄"""
        captured = {}

        def fake_autocomplete(message, **kwargs):
            captured.update(kwargs)
            for text in typed:
                list(kwargs["completer"].get_completions(Document(text), None))
            return question_returning(answer)

        with patch("cli.ui.prompts.questionary.autocomplete", side_effect=fake_autocomplete):
            result = select_one_filtered("Find", source, suggest_only=suggest_only, answers=answers)
        return result, captured

    def test_returns_candidate_value(self):
        source = lambda answers, text: [Choice("Alpha", "a"), Choice("Beta", "b")]  # noqa: E731

        result, captured = self._run("Beta", source, typed=["B"])

        assert result == "b"
        assert captured["choices"] == []
        assert captured["qmark"] == "[]"
        assert captured["complete_in_thread"] is True
        assert captured["reserve_space_for_menu"] == AUTOCOMPLETE_PAGE_SIZE == 12

    def test_rejects_unmatched_text(self):
        source = lambda answers, text: ["alpha"]  # noqa: E731

        _, captured = self._run("alpha", source, typed=["a"])
        validate = captured["validate"]

        assert validate("alpha") is True
        assert validate("zzz") == t("flow.no_matching_choice", value="zzz")

    def test_suggest_only_accepts_free_text(self):
        source = lambda answers, text: ["alpha"]  # noqa: E731

        result, captured = self._run("zzz", source, suggest_only=True, typed=["z"])

        assert captured["validate"]("zzz") is True
        assert result == "zzz"

    def test_without_source_rejects_everything(self):
        _, captured = self._run("x", None, typed=["x"])

        assert captured["validate"]("x") != True  # noqa: E712

    def test_cancel_raises_keyboard_interrupt(self):
        with pytest.raises(KeyboardInterrupt):
            self._run(None, lambda answers, text: [])

    def test_answers_passed_to_source(self):
        """이전 응답(answers)이 source에 그대로 전달됨"""
        source = MagicMock(return_value=["web-prod"])

        result, _ = self._run("web-prod", source, typed=["w"], answers={"account": "dev@example.com"})

        source.assert_called_once_with({"account": "dev@example.com"}, "w")
        assert result == "web-prod"


# =============================================================================
# Prompts 묶음
# =============================================================================


class TestPrompts:
    """Prompts는 모듈 함수에 위임"""

    def test_delegates(self):
        ui = Prompts()
        with patch.object(prompts, "confirm", return_value=True) as mock_confirm, patch.object(
            prompts, "select_one", return_value=3
        ) as mock_select, patch.object(prompts, "select_one_filtered", return_value="x") as mock_filtered:
            assert ui.confirm("q") is True
            assert ui.select_one("m", [Choice("a", 3)], "P") == 3
            assert ui.select_one_filtered("m", None, "", True, {"prev": 1}) == "x"

        mock_confirm.assert_called_once_with("q", None)
        mock_select.assert_called_once_with("m", [Choice("a", 3)], "P")
        mock_filtered.assert_called_once_with("m", None, "", True, {"prev": 1})
