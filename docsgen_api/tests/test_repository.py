import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from src.core.exceptions import EntityNotFoundError
from src.db.models import KnowledgeBranch, Subject, Teacher, TeacherLoad
from src.repositories.unit_of_work import UnitOfWork


def columns(entity):
    return {attr.key: getattr(entity, attr.key) for attr in inspect(type(entity)).column_attrs}


async def test_added_entity_is_returned_with_every_field(session_maker):
    teacher = Teacher(
        first_name="Olena",
        last_name="Kovalenko",
        middle_name="Petrivna",
        position="Docent",
        academic_degree="PhD",
        email="olena@example.edu",
    )
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).add(teacher)
        await uow.commit()
        expected = columns(teacher)

    assert expected["id"] is not None
    async with session_maker() as session:
        found = await UnitOfWork(session).repository(Teacher).get_by_id(expected["id"])
        assert columns(found) == expected


async def test_missing_id_raises_not_found_and_does_not_exist(uow):
    repo = uow.repository(Teacher)

    with pytest.raises(EntityNotFoundError) as excinfo:
        await repo.get_by_id(404)

    assert excinfo.value.entity_type is Teacher
    assert excinfo.value.entity_id == 404
    assert "Teacher" in str(excinfo.value)
    assert await repo.exists(404) is False


async def test_exists_accepts_entity_or_id(uow):
    repo = uow.repository(KnowledgeBranch)
    branch = KnowledgeBranch(code="12", name="Information technologies")
    await repo.add(branch)
    await uow.commit()

    assert await repo.exists(branch) is True
    assert await repo.exists(branch.id) is True
    assert await repo.exists(KnowledgeBranch(id=branch.id)) is True


async def test_get_all_returns_every_committed_entity(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        for i in range(5):
            await uow.repository(KnowledgeBranch).add(KnowledgeBranch(code=f"{i:02d}", name=f"Branch {i}"))
        await uow.commit()

    async with session_maker() as session:
        repo = UnitOfWork(session).repository(KnowledgeBranch)
        branches = await repo.get_all()
        assert len(branches) == 5
        assert {b.name for b in branches} == {f"Branch {i}" for i in range(5)}
        for branch in branches:
            assert (await repo.get_by_id(branch.id)) is branch


async def test_get_all_on_empty_table(uow):
    assert await uow.repository(Teacher).get_all() == []


async def test_staged_add_is_not_visible_before_commit(uow):
    repo = uow.repository(KnowledgeBranch)
    await repo.add(KnowledgeBranch(id=7, code="07", name="Pending"))

    assert await repo.exists(7) is False
    await uow.commit()
    assert await repo.exists(7) is True


async def test_add_update_delete_scenario(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).add(KnowledgeBranch(id=1, code="01", name="A"))
        await uow.commit()

    async with session_maker() as session:
        found = await UnitOfWork(session).repository(KnowledgeBranch).get_by_id(1)
        assert (found.id, found.code, found.name) == (1, "01", "A")

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).update(KnowledgeBranch(id=1, code="01", name="B"))
        await uow.commit()

    async with session_maker() as session:
        found = await UnitOfWork(session).repository(KnowledgeBranch).get_by_id(1)
        assert (found.id, found.code, found.name) == (1, "01", "B")

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).delete_by_id(1)
        await uow.commit()

    async with session_maker() as session:
        repo = UnitOfWork(session).repository(KnowledgeBranch)
        assert await repo.exists(1) is False
        with pytest.raises(EntityNotFoundError):
            await repo.get_by_id(1)


async def test_update_overwrites_every_changed_field(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).add(
            Teacher(id=3, first_name="Ivan", last_name="Petrenko", position="Assistant", email="ivan@example.edu")
        )
        await uow.commit()

    replacement = Teacher(
        id=3,
        first_name="Ivan",
        last_name="Petrenko-Shevchenko",
        middle_name="Olehovych",
        position="Senior lecturer",
        academic_degree="PhD",
        email=None,
    )
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).update(replacement)
        await uow.commit()

    async with session_maker() as session:
        found = await UnitOfWork(session).repository(Teacher).get_by_id(3)
        assert columns(found) == columns(replacement)


async def test_update_copies_onto_already_tracked_instance(uow):
    repo = uow.repository(KnowledgeBranch)
    await repo.add(KnowledgeBranch(id=2, code="02", name="Old"))
    await uow.commit()
    tracked = await repo.get_by_id(2)

    await repo.update(KnowledgeBranch(id=2, code="02", name="New"))
    await uow.commit()

    assert tracked.name == "New"
    assert (await repo.get_by_id(2)) is tracked


async def test_update_of_tracked_instance(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        repo = uow.repository(KnowledgeBranch)
        await repo.add(KnowledgeBranch(id=5, code="05", name="Before"))
        await uow.commit()

        branch = await repo.get_by_id(5)
        branch.name = "After"
        await repo.update(branch)
        await uow.commit()

    async with session_maker() as session:
        found = await UnitOfWork(session).repository(KnowledgeBranch).get_by_id(5)
        assert found.name == "After"


async def test_update_without_id_is_rejected(uow):
    with pytest.raises(ValueError):
        await uow.repository(KnowledgeBranch).update(KnowledgeBranch(code="01", name="No id"))


async def test_delete_tracked_entity(uow):
    repo = uow.repository(KnowledgeBranch)
    await repo.add(KnowledgeBranch(id=4, code="04", name="Doomed"))
    await uow.commit()

    await repo.delete(await repo.get_by_id(4))
    await uow.commit()

    assert await repo.exists(4) is False


async def test_delete_untracked_entity_by_identity(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).add(KnowledgeBranch(id=8, code="08", name="Elsewhere"))
        await uow.commit()

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).delete(KnowledgeBranch(id=8))
        await uow.commit()

    async with session_maker() as session:
        assert await UnitOfWork(session).repository(KnowledgeBranch).exists(8) is False


async def test_delete_of_pending_entity_cancels_insert(uow):
    repo = uow.repository(KnowledgeBranch)
    branch = KnowledgeBranch(id=9, code="09", name="Never stored")
    await repo.add(branch)
    await repo.delete(branch)
    await uow.commit()

    assert await repo.exists(9) is False


async def test_delete_by_id_is_undone_by_rollback(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).add(KnowledgeBranch(id=6, code="06", name="Kept"))
        await uow.commit()

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).delete_by_id(6)
        await uow.rollback()

    async with session_maker() as session:
        assert await UnitOfWork(session).repository(KnowledgeBranch).exists(6) is True


async def test_store_errors_surface_at_commit(uow):
    repo = uow.repository(Teacher)
    await repo.add(Teacher(first_name="Nameless"))

    with pytest.raises(IntegrityError):
        await uow.commit()
    await uow.rollback()
    assert await repo.get_all() == []


async def test_delete_by_id_after_add_in_same_scope(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        repo = uow.repository(KnowledgeBranch)
        await repo.add(KnowledgeBranch(id=5, code="05", name="Short-lived"))
        await repo.delete_by_id(5)
        await uow.commit()

    async with session_maker() as session:
        assert await UnitOfWork(session).repository(KnowledgeBranch).exists(5) is False


async def test_delete_by_id_is_applied_only_at_commit(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(KnowledgeBranch).add(KnowledgeBranch(id=11, code="11", name="Staged delete"))
        await uow.commit()

    async with session_maker() as session:
        uow = UnitOfWork(session)
        repo = uow.repository(KnowledgeBranch)
        await repo.delete_by_id(11)
        assert await repo.exists(11) is True
        await uow.commit()
        assert await repo.exists(11) is False


async def test_delete_by_id_of_missing_id_is_a_no_op(uow):
    repo = uow.repository(KnowledgeBranch)
    await repo.add(KnowledgeBranch(id=1, code="01", name="Kept"))
    await repo.delete_by_id(404)
    await uow.commit()

    assert await repo.exists(1) is True
    assert await repo.exists(404) is False


async def test_update_writes_unset_columns_as_null(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).add(
            Teacher(id=3, first_name="Ivan", last_name="Petrenko", middle_name="Olehovych", email="ivan@example.edu")
        )
        await uow.commit()

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).update(Teacher(id=3, first_name="Iryna", last_name="Melnyk"))
        await uow.commit()

    async with session_maker() as session:
        found = await UnitOfWork(session).repository(Teacher).get_by_id(3)
        assert (found.first_name, found.last_name) == ("Iryna", "Melnyk")
        assert (found.middle_name, found.email, found.position) == (None, None, None)


async def test_update_writes_column_defaults_for_unset_columns(session_maker):
    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(Teacher).add(Teacher(id=1, first_name="Olena", last_name="Kovalenko"))
        await uow.repository(Subject).add(Subject(id=1, name="Databases", credits=5.0, hours=150))
        await uow.flush()
        await uow.repository(TeacherLoad).add(
            TeacherLoad(
                id=1,
                teacher_id=1,
                subject_id=1,
                academic_year="2024-2025",
                semester=1,
                lecture_hours=30,
                laboratory_hours=16,
            )
        )
        await uow.commit()

    async with session_maker() as session:
        uow = UnitOfWork(session)
        await uow.repository(TeacherLoad).update(
            TeacherLoad(id=1, teacher_id=1, subject_id=1, academic_year="2024-2025", semester=2)
        )
        await uow.commit()

    async with session_maker() as session:
        load = await UnitOfWork(session).repository(TeacherLoad).get_by_id(1)
        assert load.semester == 2
        assert (load.lecture_hours, load.practical_hours, load.laboratory_hours) == (0, 0, 0)
