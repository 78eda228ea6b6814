"""In-memory stand-ins for the parts of the Firestore client the app uses."""
import itertools


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocRef:
    def __init__(self, doc_id):
        self.id = doc_id


class FakeCollection:
    _ids = itertools.count(1)

    def __init__(self, docs=None, fail_with=None):
        self.docs = dict(docs or {})
        self.fail_with = fail_with
        self._filter = None

    def stream(self):
        if self.fail_with is not None:
            raise self.fail_with
        items = self.docs.items()
        if self._filter is not None:
            field, value = self._filter
            items = [(k, v) for k, v in items if v.get(field) == value]
        return iter([FakeSnapshot(k, v) for k, v in items])

    def get(self):
        return list(self.stream())

    def where(self, field, op, value):
        assert op == "=="
        view = FakeCollection(self.docs, self.fail_with)
        view._filter = (field, value)
        return view

    def add(self, data):
        if self.fail_with is not None:
            raise self.fail_with
        doc_id = f"doc{next(self._ids)}"
        self.docs[doc_id] = data
        return None, FakeDocRef(doc_id)


class FakeDb:
    def __init__(self, collections=None):
        self.collections = collections or {}

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())
