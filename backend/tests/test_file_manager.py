from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from modforge.models.notification import NotificationVariant
from modforge.models.project import Platform
from modforge.tools.exceptions import (
    DuplicatePathError,
    InvalidFileOperationError,
    PathValidationError,
)
from modforge.tools.mod_templates import get_descriptor


@pytest.mark.asyncio
async def test_create_then_list_returns_single_record(file_manager):
    created = await file_manager.create_file("Main.java", "src/Main.java", "class Main{}", "java")

    files = await file_manager.list_files()

    assert created is not None
    assert files is not None
    assert len(files) == 1
    assert files[0].path == "src/Main.java"
    assert files[0].content == "class Main{}"


@pytest.mark.asyncio
async def test_list_empty_project(file_manager):
    assert await file_manager.list_files() == []


@pytest.mark.asyncio
async def test_blank_name_is_silent_noop(file_manager, notification_service):
    assert await file_manager.create_file("  ", "src/x.java") is None
    assert file_manager.last_error is None
    assert notification_service.history(file_manager.project_id) == []


@pytest.mark.asyncio
async def test_duplicate_path_is_reported(file_manager, notification_service):
    assert await file_manager.create_file("Main.java", "src/Main.java") is not None

    assert await file_manager.create_file("Main.java", "src/Main.java") is None

    assert isinstance(file_manager.last_error, DuplicatePathError)
    latest = notification_service.history(file_manager.project_id)[-1]
    assert latest.variant == NotificationVariant.DESTRUCTIVE
    assert latest.title == "Failed to create file"
    assert len(file_manager.files) == 1


@pytest.mark.asyncio
async def test_nested_folders_build_folder_tree(file_manager):
    await file_manager.create_folder("src")
    await file_manager.create_folder("utils", "src")
    sub = await file_manager.create_folder("sub", "src/utils")

    assert sub is not None
    assert sub.path == "src/utils/sub"
    assert sub.parent_path == "src/utils"

    tree = file_manager.tree()
    utils = tree["src"].children["utils"]
    assert utils.children["sub"].type == "folder"
    assert utils.children["sub"].children == {}
    assert file_manager.folder_paths() == ["src", "src/utils", "src/utils/sub"]


@pytest.mark.asyncio
async def test_create_folder_under_missing_parent(file_manager):
    await file_manager.create_folder("utils", "src")

    tree = file_manager.tree()

    assert tree["src"].file is None
    assert tree["src"].children["utils"].type == "folder"


@pytest.mark.asyncio
async def test_update_renames_only_target(file_manager):
    record = await file_manager.create_file("Main.java", "src/Main.java", "old", "java")
    await file_manager.create_folder("lib")
    sibling = await file_manager.create_file("Util.java", "lib/Util.java", "util", "java")
    await file_manager.open_file(record.id)

    updated = await file_manager.update_file(record.id, "new content", "src/Renamed.java")

    assert updated is not None
    assert updated.path == "src/Renamed.java"
    assert updated.name == "Renamed.java"
    assert updated.content == "new content"
    assert file_manager.current_file == updated

    files = {f.id: f for f in await file_manager.list_files()}
    assert files[sibling.id].path == "lib/Util.java"
    assert files[sibling.id].content == "util"


@pytest.mark.asyncio
async def test_renaming_folder_refreshes_mirror_for_descendants(file_manager):
    folder = await file_manager.create_folder("src")
    child = await file_manager.create_file("Main.java", "src/Main.java", "class Main{}", "java")

    await file_manager.update_file(folder.id, "", "code")

    mirrored = {f.id: f for f in file_manager.files}
    assert mirrored[folder.id].path == "code"
    assert mirrored[child.id].path == "code/Main.java"
    assert mirrored[child.id].parent_path == "code"


@pytest.mark.asyncio
async def test_delete_folder_removes_descendants(file_manager):
    folder = await file_manager.create_folder("src")
    child = await file_manager.create_file("Main.java", "src/Main.java")
    await file_manager.create_file("README.md", "README.md")
    await file_manager.open_file(child.id)

    assert await file_manager.delete_file(folder.id) is True

    assert [f.path for f in file_manager.files] == ["README.md"]
    assert file_manager.current_file is None
    assert [f.path for f in await file_manager.list_files()] == ["README.md"]


@pytest.mark.asyncio
async def test_delete_missing_file_returns_false(file_manager):
    assert await file_manager.delete_file("missing") is False
    assert file_manager.last_error is not None


@pytest.mark.asyncio
async def test_move_into_folder_and_back_to_root(file_manager):
    await file_manager.create_folder("src")
    record = await file_manager.create_file("Main.java", "Main.java", "class Main{}", "java")

    moved = await file_manager.move_file(record.id, "src")
    assert moved is not None
    assert moved.path == "src/Main.java"
    assert moved.content == "class Main{}"

    back = await file_manager.move_file(record.id, None)
    assert back is not None
    assert back.path == "Main.java"
    assert back.parent_path is None


@pytest.mark.asyncio
async def test_move_to_current_location_is_noop(file_manager):
    record = await file_manager.create_file("Main.java", "src/Main.java")

    same = await file_manager.move_file(record.id, "src")

    assert same is not None
    assert same.path == "src/Main.java"


@pytest.mark.asyncio
async def test_move_folder_into_own_subtree_is_rejected(file_manager):
    folder = await file_manager.create_folder("src")
    await file_manager.create_folder("inner", "src")

    assert await file_manager.move_file(folder.id, "src/inner") is None
    assert isinstance(file_manager.last_error, PathValidationError)
    assert await file_manager.move_file(folder.id, "src") is None


@pytest.mark.asyncio
async def test_move_folder_carries_descendants(file_manager):
    await file_manager.create_folder("lib")
    folder = await file_manager.create_folder("utils", "src")
    await file_manager.create_file("Util.java", "src/utils/Util.java")

    await file_manager.move_file(folder.id, "lib")

    paths = [f.path for f in await file_manager.list_files()]
    assert paths == ["lib", "lib/utils", "lib/utils/Util.java"]


@pytest.mark.asyncio
async def test_create_from_template(file_manager):
    descriptor = get_descriptor("block")

    record = await file_manager.create_from_template(descriptor, "RubyBlock", "src", "gems")

    assert record is not None
    assert record.name == "RubyBlock.java"
    assert record.path == "src/RubyBlock.java"
    assert record.file_type == "java"
    assert "public class RubyBlock extends Block" in record.content


@pytest.mark.asyncio
async def test_create_from_json_template_substitutes_mod_id(file_manager):
    record = await file_manager.create_from_template(
        get_descriptor("itemModel"), "ruby.json", mod_id="gems"
    )

    assert record is not None
    assert record.name == "ruby.json"
    assert record.file_type == "json"
    assert '"layer0": "gems:item/ruby"' in record.content


@pytest.mark.asyncio
async def test_scaffold_sample_creates_directories_then_files(file_manager):
    records = await file_manager.scaffold_sample(
        "testmod", project_name="Test Mod", platform=Platform.FABRIC
    )

    assert records is not None
    paths = [r.path for r in records]
    assert "src/main/java/com/yourname/testmod/TestModMod.java" in paths
    assert "src/main/resources/fabric.mod.json" in paths

    directories = {r.path for r in records if r.is_directory}
    assert {"src", "src/main", "src/main/java/com/yourname/testmod/registry"} <= directories
    for record in records:
        if record.parent_path is not None:
            assert record.parent_path in directories

    first_file = next(i for i, r in enumerate(records) if not r.is_directory)
    assert all(not r.is_directory for r in records[first_file:])

    gradlew = next(r for r in records if r.path == "gradlew")
    assert gradlew.file_type == "sh"


@pytest.mark.asyncio
async def test_scaffold_sample_reuses_existing_directories(file_manager):
    await file_manager.create_folder("src")

    records = await file_manager.scaffold_sample("testmod")

    assert records is not None
    assert "src" not in {r.path for r in records}


@pytest.mark.asyncio
async def test_scaffold_sample_rolls_back_on_conflict(file_manager):
    await file_manager.create_file("README.md", "README.md", "mine")

    assert await file_manager.scaffold_sample("testmod") is None

    assert isinstance(file_manager.last_error, DuplicatePathError)
    assert [f.path for f in await file_manager.list_files()] == ["README.md"]


@pytest.mark.asyncio
async def test_clear_project(file_manager):
    await file_manager.scaffold_sample("testmod")
    await file_manager.list_files()

    assert await file_manager.clear_project() is True

    assert file_manager.files == []
    assert file_manager.current_file is None
    assert await file_manager.list_files() == []


@pytest.mark.asyncio
async def test_store_failure_is_reported_not_raised(file_manager, notification_service):
    file_manager.repository.list_files = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("database is locked"))
    )
    file_manager.repository.rollback = AsyncMock()

    assert await file_manager.list_files() is None

    assert isinstance(file_manager.last_error, OperationalError)
    file_manager.repository.rollback.assert_awaited_once()
    latest = notification_service.history(file_manager.project_id)[-1]
    assert latest.title == "Failed to load files"
    assert latest.variant == NotificationVariant.DESTRUCTIVE


@pytest.mark.asyncio
async def test_scaffold_sample_uses_given_mod_id(file_manager):
    records = await file_manager.scaffold_sample("custommod", project_name="Test Mod")

    assert records is not None
    paths = [r.path for r in records]
    assert "src/main/java/com/yourname/custommod/TestModMod.java" in paths
    assert "src/main/resources/assets/custommod/lang/en_us.json" in paths
    assert not any("testmod" in path for path in paths)


@pytest.mark.asyncio
async def test_move_onto_file_is_rejected(file_manager):
    await file_manager.create_file("Main.java", "Main.java")
    other = await file_manager.create_file("Other.java", "Other.java")

    assert await file_manager.move_file(other.id, "Main.java") is None

    assert isinstance(file_manager.last_error, InvalidFileOperationError)
    assert [f.path for f in await file_manager.list_files()] == ["Main.java", "Other.java"]


@pytest.mark.asyncio
async def test_move_into_implied_folder(file_manager):
    await file_manager.create_file("Util.java", "lib/Util.java")
    record = await file_manager.create_file("Main.java", "Main.java")

    moved = await file_manager.move_file(record.id, "lib")

    assert moved is not None
    assert moved.path == "lib/Main.java"
