import threading

from timedtask import Canceled, Checkable, Context, DeadlineExceeded


def test_background_never_done():
    ctx = Context.background()
    assert ctx.err() is None
    assert not ctx.done
    assert ctx.deadline is None


def test_cancel_returns_stable_error():
    ctx = Context.background().with_cancel()
    ctx.cancel()
    first = ctx.err()
    assert isinstance(first, Canceled)
    assert ctx.err() is first
    ctx.cancel(RuntimeError("later"))
    assert ctx.err() is first


def test_cancel_with_cause():
    ctx = Context.background().with_cancel()
    cause = RuntimeError("shutdown")
    ctx.cancel(cause)
    assert ctx.err() is cause


def test_parent_cancel_reaches_child():
    parent = Context.background().with_cancel()
    child = parent.with_cancel()
    parent.cancel()
    assert child.err() is parent.err()


def test_child_cancel_does_not_reach_parent():
    parent = Context.background().with_cancel()
    child = parent.with_cancel()
    child.cancel()
    assert child.done
    assert not parent.done


def test_expired_timeout():
    ctx = Context.background().with_timeout(0)
    assert isinstance(ctx.err(), DeadlineExceeded)
    assert ctx.err() is ctx.err()


def test_future_timeout_not_done():
    ctx = Context.background().with_timeout(3600)
    assert ctx.err() is None
    assert ctx.deadline is not None


def test_nested_timeout_keeps_earlier_deadline():
    outer = Context.background().with_timeout(10)
    inner = outer.with_timeout(3600)
    assert inner.deadline == outer.deadline


def test_cancel_from_another_thread():
    ctx = Context.background().with_cancel()
    worker = threading.Thread(target=ctx.cancel)
    worker.start()
    worker.join()
    assert isinstance(ctx.err(), Canceled)


def test_context_is_checkable():
    assert isinstance(Context.background(), Checkable)


def test_with_cancel_inherits_deadline():
    outer = Context.background().with_timeout(10)
    inner = outer.with_cancel()
    assert inner.deadline == outer.deadline
    assert inner.with_cancel().deadline == outer.deadline
