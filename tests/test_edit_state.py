from domain.entities import TaskDraft


def test_begin_seeds_buffer_from_task(store, edits):
    task = store.add(TaskDraft(title="title", description="desc"))
    buffer = edits.begin(task.id)
    assert (buffer.title, buffer.description) == ("title", "desc")
    assert edits.is_editing(task.id)


def test_begin_unknown_task(edits):
    assert edits.begin("missing") is None
    assert not edits.is_editing("missing")


def test_commit_applies_buffer(store, edits):
    task = store.add(TaskDraft(title="old", description="old desc"))
    edits.begin(task.id)
    edits.update(task.id, title="new")

    assert store.get_task(task.id).title == "old"
    edits.commit(task.id)

    saved = store.get_task(task.id)
    assert (saved.title, saved.description) == ("new", "old desc")
    assert not edits.is_editing(task.id)


def test_cancel_leaves_task_unchanged(store, edits):
    task = store.add(TaskDraft(title="old"))
    edits.begin(task.id)
    edits.update(task.id, title="new", description="changed")
    edits.cancel(task.id)

    assert store.get_task(task.id).title == "old"
    assert store.get_task(task.id).description is None
    assert edits.commit(task.id) is None


def test_toggle_opens_and_closes(store, edits):
    task = store.add(TaskDraft(title="a"))
    assert edits.toggle(task.id) is not None
    assert edits.toggle(task.id) is None
    assert not edits.is_editing(task.id)


def test_update_without_buffer(edits):
    assert edits.update("missing", title="x") is None


def test_prune_drops_deleted_tasks(store, edits):
    keep = store.add(TaskDraft(title="keep"))
    gone = store.add(TaskDraft(title="gone"))
    edits.begin(keep.id)
    edits.begin(gone.id)
    store.delete(gone.id)

    edits.prune()
    assert edits.is_editing(keep.id)
    assert not edits.is_editing(gone.id)


def test_commit_after_delete_is_noop(store, edits):
    task = store.add(TaskDraft(title="a"))
    edits.begin(task.id)
    store.delete(task.id)
    assert edits.commit(task.id) is None
    assert store.tasks == []
