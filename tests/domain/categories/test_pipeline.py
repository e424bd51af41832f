from __future__ import annotations

from dataclasses import dataclass

from tilesync.domain.categories import (
    CategoryPhase,
    CategoryPipeline,
    CategoryState,
    DeduplicationPhase,
    MigrationPhase,
    NormalizationPhase,
    RegistryContext,
    default_pipeline,
)


@dataclass(slots=True)
class _RecordingPhase(CategoryPhase):
    name: str
    calls: list[str]

    def run(self, state: CategoryState, *, context: RegistryContext) -> None:
        _ = (state, context)
        self.calls.append(self.name)


def test_pipeline_runs_phases_in_order() -> None:
    calls: list[str] = []
    pipeline = CategoryPipeline().with_phase(_RecordingPhase(name="first", calls=calls))
    pipeline = pipeline.extend([_RecordingPhase(name="second", calls=calls)])

    pipeline.run(CategoryState(), context=RegistryContext(own_package="com.example"))

    assert calls == ["first", "second"]


def test_default_pipeline_deduplicates_before_renumbering() -> None:
    phases = default_pipeline().phases

    assert [type(phase) for phase in phases] == [
        MigrationPhase,
        DeduplicationPhase,
        NormalizationPhase,
    ]
    assert [phase.name for phase in phases] == ["migration", "deduplication", "normalization"]
