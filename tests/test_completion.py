import pytest

from dbuswire.completion import CompletionFunc, CompletionListener


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        CompletionListener()


def test_subclass_receives_task_directly_and_through_func():
    class Recorder(CompletionListener):
        def __init__(self):
            self.tasks = []

        def handle_completion(self, task):
            self.tasks.append(task)

    recorder = Recorder()
    recorder.handle_completion("first")
    forwarder = CompletionFunc(recorder.handle_completion)
    forwarder.handle_completion("second")
    assert recorder.tasks == ["first", "second"]


def test_completion_func_forwards_task():
    calls = []
    listener = CompletionFunc(calls.append)
    task = object()
    listener.handle_completion(task)
    assert calls == [task]


def test_completion_func_is_a_listener():
    listener = CompletionFunc(print)
    assert isinstance(listener, CompletionListener)
    assert listener.func is print


def test_completion_func_without_callable_then_with():
    calls = []
    listener = CompletionFunc(None)
    listener.handle_completion("ignored")
    listener.func = calls.append
    listener.handle_completion("seen")
    assert calls == ["seen"]


def test_completion_func_propagates_exceptions():
    def boom(task):
        raise RuntimeError(task)

    listener = CompletionFunc(boom)
    with pytest.raises(RuntimeError, match="bad"):
        listener.handle_completion("bad")