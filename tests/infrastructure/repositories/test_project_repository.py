"""Tests for project membership persistence."""

from __future__ import annotations

import pytest

from synergysphere.domain.entities import Project, ProjectRole
from synergysphere.domain.exceptions import ConflictError
from synergysphere.infrastructure.repositories import ProjectRepository


@pytest.fixture()
def project(session, make_user):
    owner = make_user("ana@example.com")
    return ProjectRepository(session).create(
        Project(id=None, name="Apollo", description=None, owner_id=owner.id)
    )


def test_adding_an_existing_member_raises_conflict(session, make_user, project):
    bob = make_user("bob@example.com")
    repository = ProjectRepository(session)
    repository.add_member(project.id, bob.id, ProjectRole.ADMIN)

    with pytest.raises(ConflictError):
        repository.add_member(project.id, bob.id, ProjectRole.MEMBER)

    member = repository.get_member(project.id, bob.id)
    assert member is not None
    assert member.role is ProjectRole.ADMIN
    assert sorted(repository.list_member_ids(project.id)) == sorted([project.owner_id, bob.id])


def test_update_member_role(session, make_user, project):
    bob = make_user("bob@example.com")
    repository = ProjectRepository(session)
    repository.add_member(project.id, bob.id, ProjectRole.MEMBER)

    updated = repository.update_member_role(project.id, bob.id, ProjectRole.ADMIN)

    assert updated is not None
    assert updated.role is ProjectRole.ADMIN
    assert repository.get_member(project.id, bob.id).role is ProjectRole.ADMIN
    assert repository.update_member_role(project.id, 9999, ProjectRole.ADMIN) is None


def test_out_of_range_ids_are_not_found(session, project):
    repository = ProjectRepository(session)

    assert repository.get(2**70) is None
    assert repository.get_member(project.id, 2**70) is None
    assert repository.remove_member(project.id, 2**70) is False
