from ledgerview.domain.enums import ExecutionStatus, LinkCategory, LoadStatus, Network, TransactionKind


class TestEnumsAreStringMixin:
    """All enums use (str, Enum) so they serialize to strings in JSON."""

    def test_network_is_str(self):
        assert isinstance(Network.DEVNET, str)
        assert Network.DEVNET == "devnet"

    def test_tx_kind_matches_rpc_spelling(self):
        assert TransactionKind.TRANSFER_SUI == "TransferSui"
        assert TransactionKind("ChangeEpoch") is TransactionKind.CHANGE_EPOCH

    def test_tx_kind_is_closed(self):
        assert len(TransactionKind) == 8

    def test_load_status_wire_values(self):
        assert [s.value for s in LoadStatus] == ["pending", "loaded", "fail"]

    def test_execution_status(self):
        assert ExecutionStatus("failure") is ExecutionStatus.FAILURE

    def test_link_category(self):
        assert LinkCategory.ADDRESSES == "addresses"
