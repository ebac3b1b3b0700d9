"""Apply relative-path headers to the files of a change set."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from add_header.constants import DEFAULT_BASE_REF, DEFAULT_HEAD_REF
from add_header.errors import MissingWorkingCopyError
from add_header.git import GitRepository
from add_header.headers import header_already_present, prepare_with_rule, splice_header
from add_header.ignore import IgnorePredicate, load_ignore, should_process_path
from add_header.models import FileOutcome, FileStatus, HeaderSource, RunReport
from add_header.rewrite import Rewriter
from add_header.rules.models import HeaderRuleConfig, ResolvedRule
from add_header.rules.repository import RuleConfigCache, RuleConfigRepository
from add_header.rules.resolver import resolve_rule
from add_header.utils import read_text, to_posix, write_text


class HeaderPipeline:
    def __init__(
        self,
        root: Path,
        git: Optional[GitRepository] = None,
        rules: Optional[RuleConfigRepository] = None,
        rewriter: Optional[Rewriter] = None,
        cache: Optional[RuleConfigCache] = None,
        dry_run: bool = False,
    ) -> None:
        self.root = root
        self.git = git or GitRepository(root)
        self.rules = rules or RuleConfigRepository(root)
        self.rewriter = rewriter
        self.cache = cache or RuleConfigCache()
        self.dry_run = dry_run

    def _config(self) -> HeaderRuleConfig:
        return self.cache.load(self.rules)

    def _select(
        self, paths: Iterable[str], ignores: IgnorePredicate, report: RunReport
    ) -> list[str]:
        selected: list[str] = []
        for path in paths:
            rel = to_posix(path)
            if not should_process_path(rel):
                report.add(FileOutcome(rel, FileStatus.FILTERED, "built-in path filter"))
            elif ignores(rel):
                report.add(FileOutcome(rel, FileStatus.IGNORED, "matched ignore file"))
            else:
                selected.append(rel)
        return selected

    async def run(
        self,
        changed_files: Optional[Iterable[str]] = None,
        base: str = DEFAULT_BASE_REF,
        head: str = DEFAULT_HEAD_REF,
    ) -> RunReport:
        if not self.root.is_dir():
            raise MissingWorkingCopyError(self.root)

        config = self._config()
        ignores = load_ignore(self.root)
        paths = (
            list(changed_files)
            if changed_files is not None
            else self.git.changed_files(base, head)
        )

        report = RunReport(dry_run=self.dry_run)
        for rel in self._select(paths, ignores, report):
            report.add(await self._process(rel, config))
        return report

    async def _process(self, rel: str, config: HeaderRuleConfig) -> FileOutcome:
        abs_path = self.root / rel
        if not abs_path.is_file():
            return FileOutcome(rel, FileStatus.MISSING, "not found on disk")

        rule = resolve_rule(rel, config)
        original = read_text(abs_path)
        prepared = prepare_with_rule(rel, original, rule)
        if header_already_present(original, prepared):
            if rule.is_skip:
                return FileOutcome(rel, FileStatus.SKIPPED_RULE, "rule action is skip")
            return FileOutcome(rel, FileStatus.PRESENT, "header already present")

        target = splice_header(original, prepared)
        if self.dry_run:
            return FileOutcome(
                rel, FileStatus.WOULD_EDIT, f"missing {prepared.header.strip()!r}"
            )

        final, source, detail = await self._rewrite(rel, original, target, rule)
        if final == original:
            return FileOutcome(rel, FileStatus.PRESENT, "no textual change", source)

        write_text(abs_path, final)
        self.git.stage(rel)
        return FileOutcome(rel, FileStatus.EDITED, detail, source)

    async def _rewrite(
        self, rel: str, original: str, target: str, rule: ResolvedRule
    ) -> tuple[str, HeaderSource, str]:
        if self.rewriter is None:
            return target, HeaderSource.DETERMINISTIC, "header inserted"

        try:
            candidate = await self.rewriter(rel, original, target)
        except Exception as exc:
            return target, HeaderSource.DETERMINISTIC, f"rewrite failed ({exc}); fallback used"

        if not candidate:
            return target, HeaderSource.DETERMINISTIC, "empty rewrite; fallback used"
        if not header_already_present(candidate, prepare_with_rule(rel, candidate, rule)):
            return target, HeaderSource.DETERMINISTIC, "rewrite lacks header; fallback used"
        return candidate, HeaderSource.REWRITE, "header inserted by rewrite"


async def run(
    root: Path,
    base: str = DEFAULT_BASE_REF,
    head: str = DEFAULT_HEAD_REF,
    changed_files: Optional[Iterable[str]] = None,
    rewriter: Optional[Rewriter] = None,
    cache: Optional[RuleConfigCache] = None,
    config_path: Optional[Path] = None,
) -> int:
    pipeline = HeaderPipeline(
        root=root,
        rules=RuleConfigRepository(root, config_path),
        rewriter=rewriter,
        cache=cache,
    )
    report = await pipeline.run(changed_files=changed_files, base=base, head=head)
    return report.edited
