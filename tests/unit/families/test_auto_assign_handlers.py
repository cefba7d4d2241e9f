"""
Preview/execute handlers against an in-memory unit of work.

The fake keeps a committed store and hands out a deep-copied working set per
transaction, so rollback on error discards everything appended in it.
"""
import copy
from datetime import datetime, timezone
from uuid import UUID

import pytest

from src.families.application.commands.execute_auto_assign_command import (
    ExecuteAutoAssignCommand,
    ExecuteAutoAssignCommandHandler,
)
from src.families.application.dto.commit_dto import ApprovedAssignment
from src.families.application.services.auto_assign_service import AutoAssignService
from src.families.domain.exceptions import (
    FamilyNotFoundError,
    FamilySlotNotFoundError,
    StudentAlreadyInFamilyError,
    StudentNotFoundError,
)
from src.families.domain.value_objects.enums import FamilyStatus, Relationship
from src.shared.exceptions import ValidationError
from tests.factories import BATCH, TODAY, family_students, make_family, make_pair, make_student


class FakeFamilyRepository:
    def __init__(self, uow):
        self.uow = uow

    async def list_assignable(self, status):
        return [
            copy.deepcopy(f)
            for f in self.uow.working.values()
            if f.status.value == status and f.has_parent_pairs
        ]

    async def get_by_id(self, family_id):
        family = self.uow.working.get(family_id)
        return copy.deepcopy(family) if family else None

    async def get_for_update(self, family_id):
        return await self.get_by_id(family_id)

    async def append_child(self, family_id, slot, child):
        family = self.uow.working[family_id]
        family.parent_pair_at(slot).children.append(child)


class FakeStudentRepository:
    def __init__(self, uow):
        self.uow = uow

    async def get_by_id(self, student_id):
        return self.uow.student_rows.get(student_id)

    async def list_active_in_batch(self, batch):
        return [s for s in self.uow.student_rows.values() if s.is_active and s.batch == batch]

    async def list_batches(self):
        return sorted({s.batch for s in self.uow.student_rows.values() if s.is_active})


class FakeUnitOfWork:
    def __init__(self, families=(), students=()):
        self.committed = {f.id: f for f in families}
        self.student_rows = {s.id: s for s in students}
        for family in families:
            for s in family_students(family):
                self.student_rows.setdefault(s.id, s)
        self.working = {}
        self.commits = 0
        self.rollbacks = 0
        self.families = FakeFamilyRepository(self)
        self.students = FakeStudentRepository(self)

    async def __aenter__(self):
        self.working = copy.deepcopy(self.committed)
        self._committed_this_round = False
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None or not self._committed_this_round:
            await self.rollback()

    async def commit(self):
        self.committed = self.working
        self._committed_this_round = True
        self.commits += 1

    async def rollback(self):
        self.working = {}
        self.rollbacks += 1


def service(uow) -> AutoAssignService:
    return AutoAssignService(uow, today=lambda: TODAY)


def children_of(uow, family):
    return uow.committed[family.id].grandparents[0].parent_pairs[0].children


# ─── Preview ─────────────────────────────────────────────────────────────────

async def test_preview_requires_mode_and_batch():
    uow = FakeUnitOfWork([make_family(make_pair())], [make_student("male")])

    with pytest.raises(ValidationError, match="Mode and target batch are required"):
        await service(uow).preview(mode="homogeneous", target_batch="")


async def test_preview_without_families():
    uow = FakeUnitOfWork([], [make_student("male")])

    with pytest.raises(ValidationError) as exc:
        await service(uow).preview(mode="homogeneous", target_batch=BATCH)
    assert exc.value.message == "No eligible families found (families with both parents)"


async def test_preview_ignores_finished_families():
    finished = make_family(make_pair(), status=FamilyStatus.FINISHED)
    uow = FakeUnitOfWork([finished], [make_student("male")])

    with pytest.raises(ValidationError, match="No eligible families found"):
        await service(uow).preview(mode="homogeneous", target_batch=BATCH)


async def test_preview_with_empty_batch():
    uow = FakeUnitOfWork([make_family(make_pair())])

    with pytest.raises(ValidationError) as exc:
        await service(uow).preview(mode="homogeneous", target_batch="1999")
    assert exc.value.message == "No students found in batch 1999"


async def test_preview_when_no_slot_qualifies():
    full = make_family(make_pair(children=[make_student("male")]))
    uow = FakeUnitOfWork([full], [make_student("female")])

    with pytest.raises(ValidationError) as exc:
        await service(uow).preview(
            mode="homogeneous", target_batch=BATCH, max_children_per_family=1
        )
    assert exc.value.message == "No families available for assignment with current criteria"


async def test_preview_builds_assignments_statistics_and_configuration():
    family = make_family(make_pair(), title="Lions")
    son, daughter = make_student("male", student_code="S-1"), make_student("female")
    uow = FakeUnitOfWork([family], [son, daughter])

    result = await service(uow).preview(
        mode="homogeneous", target_batch=BATCH, max_children_per_family=2, address_level="wereda"
    )

    assert result.preview is True
    assert [a.student_id for a in result.assignments] == [str(son.id), str(daughter.id)]
    first = result.assignments[0]
    assert first.family_title == "Lions"
    assert (first.grandparent_index, first.parent_pair_index) == (0, 0)
    assert first.relationship == "son"
    assert first.birth_order == 1
    assert first.student.student_code == "S-1"
    assert first.address_match == "Matched kebele: 01"

    stats = result.statistics
    assert stats.total_assigned == 2
    assert stats.total_families_affected == 1
    assert stats.unique_students_assigned == 2
    assert (stats.gender_distribution.sons, stats.gender_distribution.daughters) == (1, 1)
    assert stats.gender_distribution.balance == 0
    assert stats.address_match_quality == 1.0
    assert stats.quality_level == "Excellent"
    assert stats.average_diversity_score is None

    assert result.configuration.address_level == "wereda"
    assert result.configuration.max_children_per_family == 2
    assert result.failed_assignments == []


async def test_heterogeneous_preview_statistics():
    family = make_family(make_pair())
    candidates = [
        make_student("male", region="Oromia"),
        make_student("female", zone="Awi"),
    ]
    uow = FakeUnitOfWork([family], candidates)

    result = await service(uow).preview(mode="heterogeneous", target_batch=BATCH)

    assert [a.diversity_score for a in result.assignments] == [4, 3]
    assert result.statistics.average_diversity_score == pytest.approx(3.5)
    assert result.statistics.diversity_level == "High"
    assert result.statistics.address_match_quality is None


async def test_preview_reports_unfilled_slots():
    family = make_family(make_pair(), title="Lions")
    stranger = make_student("male", region="Tigray", zone="Central", wereda="Axum", kebele="03")
    uow = FakeUnitOfWork([family], [stranger])

    result = await service(uow).preview(mode="homogeneous", target_batch=BATCH)

    assert result.assignments == []
    assert result.statistics.quality_level == "Poor"
    [failure] = result.failed_assignments
    assert failure.family_title == "Lions"
    assert failure.reason == "No suitable students available matching criteria"


async def test_preview_is_repeatable_and_writes_nothing():
    family = make_family(make_pair())
    uow = FakeUnitOfWork([family], [make_student("male"), make_student("female")])

    first = await service(uow).preview(mode="homogeneous", target_batch=BATCH)
    second = await service(uow).preview(mode="homogeneous", target_batch=BATCH)

    assert first == second
    assert uow.commits == 0
    assert children_of(uow, family) == []


async def test_list_batches():
    uow = FakeUnitOfWork(
        students=[
            make_student(batch="2025"),
            make_student(batch="2024"),
            make_student(batch="2023", is_active=False),
        ]
    )

    assert await service(uow).list_batches() == ["2024", "2025"]


# ─── Execute ─────────────────────────────────────────────────────────────────

def approve(family, student, birth_order=1, gp=0, pp=0):
    return ApprovedAssignment(
        family_id=family.id,
        grandparent_index=gp,
        parent_pair_index=pp,
        student_id=student.id,
        relationship=Relationship.for_gender(student.gender),
        birth_order=birth_order,
        address_match="Matched kebele: 01",
    )


async def test_execute_requires_assignments():
    uow = FakeUnitOfWork()

    with pytest.raises(ValidationError, match="No assignments to execute"):
        await service(uow).execute([])
    assert uow.rollbacks == 0


async def test_execute_appends_children_and_commits():
    family = make_family(make_pair(children=[make_student("female")]), title="Lions")
    son = make_student("male", first_name="Abel", last_name="Kebede", student_code="S-9")
    daughter = make_student("female")
    uow = FakeUnitOfWork([family], [son, daughter])
    clock = datetime(2026, 10, 17, 8, 30, tzinfo=timezone.utc)

    result = await ExecuteAutoAssignCommandHandler(uow, clock=lambda: clock)(
        ExecuteAutoAssignCommand(assignments=(approve(family, son, 2), approve(family, daughter, 3)))
    )

    assert result.message == "Successfully assigned 2 children"
    first, second = result.assignments
    assert first.family_title == "Lions"
    assert first.student_id == "S-9"
    assert first.student_name == "Abel Kebede"
    assert first.relationship == "son"
    assert first.birth_order == 2
    assert second.student_id == "N/A"

    stored = children_of(uow, family)
    assert [c.student_id for c in stored[1:]] == [son.id, daughter.id]
    assert stored[1].added_at == clock
    assert uow.commits == 1


async def test_execute_is_all_or_nothing_when_third_of_five_conflicts():
    families = [make_family(make_pair()) for _ in range(5)]
    students = [make_student("male") for _ in range(5)]
    items = [approve(f, s) for f, s in zip(families, students)]
    # third placement targets that family's own father
    father = families[2].grandparents[0].parent_pairs[0].father
    items[2] = approve(families[2], father)
    uow = FakeUnitOfWork(families, students)

    with pytest.raises(StudentAlreadyInFamilyError):
        await service(uow).execute(items)

    assert uow.commits == 0
    assert uow.rollbacks == 1
    for family in families:
        assert children_of(uow, family) == []


async def test_execute_sees_its_own_earlier_placements():
    family = make_family(make_pair())
    son = make_student("male")
    uow = FakeUnitOfWork([family], [son])

    with pytest.raises(StudentAlreadyInFamilyError):
        await service(uow).execute([approve(family, son, 1), approve(family, son, 2)])
    assert children_of(uow, family) == []


async def test_execute_unknown_family():
    uow = FakeUnitOfWork(students=[make_student("male")])
    ghost = make_family(make_pair())

    with pytest.raises(FamilyNotFoundError):
        await service(uow).execute([approve(ghost, make_student("male"))])


async def test_execute_unknown_slot():
    family = make_family(make_pair())
    son = make_student("male")
    uow = FakeUnitOfWork([family], [son])

    with pytest.raises(FamilySlotNotFoundError):
        await service(uow).execute([approve(family, son, pp=1)])


async def test_execute_unknown_student():
    family = make_family(make_pair())
    uow = FakeUnitOfWork([family])

    with pytest.raises(StudentNotFoundError) as exc:
        await service(uow).execute([approve(family, make_student("male"))])
    assert exc.value.status_code == 404
    assert exc.value.code == "student_not_found"


async def test_preview_then_execute_round_trip():
    family = make_family(make_pair())
    uow = FakeUnitOfWork([family], [make_student("male"), make_student("female")])
    svc = service(uow)

    preview = await svc.preview(mode="homogeneous", target_batch=BATCH)
    approved = [
        ApprovedAssignment(
            family_id=family.id,
            grandparent_index=a.grandparent_index,
            parent_pair_index=a.parent_pair_index,
            student_id=UUID(a.student_id),
            relationship=Relationship(a.relationship),
            birth_order=a.birth_order,
            address_match=a.address_match,
        )
        for a in preview.assignments
    ]

    result = await svc.execute(approved)

    assert len(result.assignments) == 2
    assert [c.birth_order for c in children_of(uow, family)] == [1, 2]
