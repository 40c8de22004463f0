import pytest

from modforge.repositories.file_repository import NewFileRecord
from modforge.repositories.project_repository import ProjectRepository
from modforge.tools.exceptions import (
    DuplicatePathError,
    FileRecordNotFoundError,
    InvalidFileOperationError,
    PathValidationError,
)


@pytest.mark.asyncio
async def test_create_and_list_ordered_by_path(file_repository, project):
    await file_repository.create_file(project.id, "b.java", "src/b.java", "class B {}", "java")
    await file_repository.create_file(project.id, "a.java", "src/a.java", "class A {}", "java")

    files = await file_repository.list_files(project.id)

    assert [f.path for f in files] == ["src/a.java", "src/b.java"]
    assert files[0].parent_path == "src"
    assert files[0].name == "a.java"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_path(file_repository, project):
    await file_repository.create_file(project.id, "Main.java", "src/Main.java")

    with pytest.raises(DuplicatePathError):
        await file_repository.create_file(project.id, "Main.java", "src/Main.java")

    assert len(await file_repository.list_files(project.id)) == 1


@pytest.mark.asyncio
async def test_create_rejects_inconsistent_name_or_parent(file_repository, project):
    with pytest.raises(PathValidationError):
        await file_repository.create_file(project.id, "Other.java", "src/Main.java")
    with pytest.raises(PathValidationError):
        await file_repository.create_file(
            project.id, "Main.java", "src/Main.java", parent_path="lib"
        )


@pytest.mark.asyncio
async def test_same_path_in_other_project_is_allowed(file_repository, db_session, project):
    other = await ProjectRepository(db_session).create_project(
        user_id="user1", name="Other", platform=project.platform, minecraft_version="1.20.1"
    )

    await file_repository.create_file(project.id, "Main.java", "src/Main.java")
    await file_repository.create_file(other.id, "Main.java", "src/Main.java")

    assert len(await file_repository.list_files(other.id)) == 1


@pytest.mark.asyncio
async def test_directory_cannot_hold_content(file_repository, project):
    with pytest.raises(InvalidFileOperationError):
        await file_repository.create_file(
            project.id, "src", "src", content="oops", is_directory=True
        )


@pytest.mark.asyncio
async def test_create_many_is_all_or_nothing(file_repository, project):
    await file_repository.create_file(project.id, "README.md", "README.md")

    with pytest.raises(DuplicatePathError):
        await file_repository.create_many(
            project.id,
            [
                NewFileRecord(path="src", is_directory=True),
                NewFileRecord(path="README.md", content="# again"),
            ],
        )

    assert [f.path for f in await file_repository.list_files(project.id)] == ["README.md"]


@pytest.mark.asyncio
async def test_create_many_rejects_duplicates_within_batch(file_repository, project):
    with pytest.raises(DuplicatePathError):
        await file_repository.create_many(
            project.id, [NewFileRecord(path="a.txt"), NewFileRecord(path="a.txt")]
        )

    assert await file_repository.list_files(project.id) == []


@pytest.mark.asyncio
async def test_rename_directory_cascades_to_descendants(file_repository, project):
    folder = await file_repository.create_file(project.id, "src", "src", is_directory=True)
    await file_repository.create_file(project.id, "Main.java", "src/Main.java")
    await file_repository.create_file(project.id, "Util.java", "src/util/Util.java")
    await file_repository.create_file(project.id, "srcs.txt", "srcs.txt")

    updated = await file_repository.update_file(folder.id, new_path="lib")

    assert updated[0].path == "lib"
    paths = {f.path: f for f in await file_repository.list_files(project.id)}
    assert set(paths) == {"lib", "lib/Main.java", "lib/util/Util.java", "srcs.txt"}
    assert paths["lib/util/Util.java"].parent_path == "lib/util"
    assert paths["lib/Main.java"].parent_path == "lib"


@pytest.mark.asyncio
async def test_move_directory_into_itself_is_rejected(file_repository, project):
    folder = await file_repository.create_file(project.id, "src", "src", is_directory=True)

    with pytest.raises(PathValidationError):
        await file_repository.update_file(folder.id, new_path="src/inner/src")

    assert (await file_repository.get_file(folder.id)).path == "src"


@pytest.mark.asyncio
async def test_rename_onto_existing_path_is_rejected(file_repository, project):
    a = await file_repository.create_file(project.id, "a.txt", "a.txt", content="a")
    await file_repository.create_file(project.id, "b.txt", "b.txt", content="b")

    with pytest.raises(DuplicatePathError):
        await file_repository.update_file(a.id, content="changed", new_path="b.txt")

    unchanged = await file_repository.get_file(a.id)
    assert unchanged.path == "a.txt"
    assert unchanged.content == "a"


@pytest.mark.asyncio
async def test_delete_directory_cascades(file_repository, project):
    folder = await file_repository.create_file(project.id, "src", "src", is_directory=True)
    await file_repository.create_file(project.id, "Main.java", "src/Main.java")
    await file_repository.create_file(project.id, "README.md", "README.md")

    removed = await file_repository.delete_file(folder.id)

    assert len(removed) == 2
    assert [f.path for f in await file_repository.list_files(project.id)] == ["README.md"]


@pytest.mark.asyncio
async def test_file_lookup_is_scoped_to_project(file_repository, project):
    record = await file_repository.create_file(project.id, "a.txt", "a.txt")

    with pytest.raises(FileRecordNotFoundError):
        await file_repository.get_file(record.id, "another-project")
    with pytest.raises(FileRecordNotFoundError):
        await file_repository.delete_file("missing")


@pytest.mark.asyncio
async def test_delete_all(file_repository, project):
    await file_repository.create_many(
        project.id,
        [NewFileRecord(path="src", is_directory=True), NewFileRecord(path="src/a.java")],
    )

    assert await file_repository.delete_all(project.id) == 2
    assert await file_repository.list_files(project.id) == []
