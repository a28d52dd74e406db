"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    fp --version                    # 버전 표시
    fp account                      # 계정 선택 (필요 시 계정 추가 제안)
    fp account --all                # "all" 선택지 포함
    fp account --no-add             # 계정 추가 제안 없이 선택
    fp project                      # 현재 계정의 프로젝트 선택
    fp project --account a@b.com    # 지정 계정의 프로젝트 선택

에러 처리:
    - FPError: stderr에 메시지 출력, exit code 1
    - KeyboardInterrupt (Ctrl-C): exit code 130

Usage:
    $ fp account --json
    {"account": "dev@example.com"}

    # 모듈로 실행
    $ python -m cli.app
"""

import functools
import json
import logging
import traceback

import click
from click import Context

from cli.i18n import set_lang, t
from core.config import get_version, settings
from core.exceptions import FPError, format_error_for_user

logger = logging.getLogger(__name__)

VERSION = get_version()

EXIT_ERROR = 1
EXIT_CANCELLED = 130


def _handle_errors(func):
    """명령 실행 중 예외를 사용자 메시지와 종료 코드로 변환"""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from cli.ui.console import print_error

        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            print_error(t("common.cancelled"))
            raise SystemExit(EXIT_CANCELLED) from None
        except FPError as e:
            print_error(f"{t('common.error')}: {format_error_for_user(e)}")
            if logger.isEnabledFor(logging.DEBUG):
                traceback.print_exc()
            raise SystemExit(EXIT_ERROR) from None

    return wrapper


def _create_context(with_registry: bool = False):
    """기본 협력자(Firebase CLI 계정 저장소/레지스트리)로 컨텍스트 생성"""
    from cli.flow import SelectionContext
    from core.auth import ConfigstoreProvider

    registry = None
    if with_registry:
        from core.registry import FirebaseCLIRegistry

        registry = FirebaseCLIRegistry()

    return SelectionContext(provider=ConfigstoreProvider(), registry=registry)


@click.group()
@click.version_option(VERSION, prog_name="fp")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default=settings.LANG if settings.LANG in ("ko", "en") else "ko",
    help=t("cli.lang_help"),
)
@click.option("--debug", is_flag=True, default=settings.DEBUG, help=t("cli.debug_help"))
@click.pass_context
def cli(ctx: Context, lang: str, debug: bool) -> None:
    """fireprompt - Firebase 계정/프로젝트 대화형 선택 도구"""
    from cli.ui.console import setup_logging

    set_lang(lang)
    setup_logging(debug)

    # Store lang in click context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["debug"] = debug


@cli.command("account", help=t("cli.account_help"))
@click.option("--all", "allow_all", is_flag=True, help=t("cli.account_all_help"))
@click.option("--no-add", "no_add", is_flag=True, help=t("cli.account_no_add_help"))
@click.option("--json", "as_json", is_flag=True, help=t("cli.json_help"))
@_handle_errors
def account_command(allow_all: bool, no_add: bool, as_json: bool) -> None:
    """계정 선택"""
    from cli.flow import select_account
    from cli.ui.console import print_success, print_warning
    from core.auth import ALL_ACCOUNTS

    ctx = _create_context()
    selected = select_account(ctx, allow_all=allow_all, prompt_to_add=not no_add)

    if selected is None:
        value = None
    elif selected == ALL_ACCOUNTS:
        value = ALL_ACCOUNTS
    else:
        value = selected.email

    if as_json:
        click.echo(json.dumps({"account": value}, ensure_ascii=False))
        return

    if value is None:
        print_warning(t("cli.no_account_selected"))
    elif value == ALL_ACCOUNTS:
        print_success(t("cli.selected_all_accounts"))
    else:
        print_success(t("cli.selected_account", email=value))


@cli.command("project", help=t("cli.project_help"))
@click.option("--account", "email", default=None, help=t("cli.project_account_help"))
@click.option("--json", "as_json", is_flag=True, help=t("cli.json_help"))
@_handle_errors
def project_command(email: str | None, as_json: bool) -> None:
    """프로젝트 선택"""
    from cli.flow import select_project
    from cli.ui.console import print_success, print_warning
    from core.auth import NotAuthenticatedError

    ctx = _create_context(with_registry=True)

    account = None
    if email:
        account = ctx.provider.find_account(email)
        if account is None:
            raise NotAuthenticatedError(t("cli.account_not_found", email=email))

    project = select_project(ctx, account)

    if as_json:
        payload = None
        if project is not None:
            payload = {
                "projectId": project.project_id,
                "displayName": project.display_name,
                "projectNumber": project.project_number,
            }
        click.echo(json.dumps({"project": payload}, ensure_ascii=False))
        return

    if project is None:
        print_warning(t("cli.no_projects"))
    else:
        print_success(t("cli.selected_project", label=project.label))


def main() -> None:
    """콘솔 스크립트 진입점"""
    cli(obj={})


if __name__ == "__main__":
    main()


__all__ = ["cli", "main", "VERSION"]
