import json

from ledgerview.domain.enums import TransactionKind
from ledgerview.infra.fixtures.source import FixtureSource


class TestFixtureSource:
    def test_bundled_fixtures_load(self, fixture_source):
        records = fixture_source.get_all_fixture_transactions()
        assert len(records) == 12
        assert [r.seq for r in records] == list(range(12))

    def test_large_amount_survives(self, fixture_source):
        record = next(r for r in fixture_source.get_all_fixture_transactions() if r.seq == 7)
        assert record.amount == 18446744073709551615000

    def test_returns_copy(self, fixture_source):
        first = fixture_source.get_all_fixture_transactions()
        first.clear()
        assert len(fixture_source.get_all_fixture_transactions()) == 12

    def test_custom_path(self, tmp_path):
        path = tmp_path / "txs.json"
        path.write_text(json.dumps([
            {"tx_id": "abc", "seq": 0, "sender": "0x1", "kind": "Publish", "status": "success"},
        ]))

        records = FixtureSource(path).get_all_fixture_transactions()
        assert len(records) == 1
        assert records[0].kind == TransactionKind.PUBLISH
        assert records[0].amount is None
