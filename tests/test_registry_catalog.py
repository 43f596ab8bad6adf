import pytest

from btcrpc.registry import BITCOIN_CORE_METHODS, DEFAULT_REGISTRY, MethodGroup, MethodRegistry
from btcrpc.registry.schema import ArgumentSpec, MethodDescriptor
from btcrpc.utils.exceptions import InvalidArgumentsError, UnknownMethodError


def test_catalog_covers_every_help_group() -> None:
    counts = {group: len(DEFAULT_REGISTRY.by_group(group)) for group in MethodGroup}
    assert counts == {
        MethodGroup.BLOCKCHAIN: 25,
        MethodGroup.CONTROL: 6,
        MethodGroup.GENERATING: 3,
        MethodGroup.MINING: 6,
        MethodGroup.NETWORK: 13,
        MethodGroup.RAWTRANSACTIONS: 17,
        MethodGroup.UTIL: 8,
        MethodGroup.WALLET: 59,
    }
    assert len(DEFAULT_REGISTRY) == len(BITCOIN_CORE_METHODS) == 137


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        BITCOIN_CORE_METHODS["evil"] = BITCOIN_CORE_METHODS["getblock"]  # type: ignore[index]


def test_lookup_is_exact_and_case_sensitive() -> None:
    assert DEFAULT_REGISTRY.exists("getblockcount")
    assert not DEFAULT_REGISTRY.exists("GetBlockCount")
    assert not DEFAULT_REGISTRY.exists("getblockcount ")
    assert not DEFAULT_REGISTRY.exists("eth_blockNumber")
    assert "getblock" in DEFAULT_REGISTRY
    assert 42 not in DEFAULT_REGISTRY


def test_exists_and_describe_are_idempotent() -> None:
    for name in ("getblock", "nosuchmethod"):
        assert DEFAULT_REGISTRY.exists(name) == DEFAULT_REGISTRY.exists(name)
        assert DEFAULT_REGISTRY.describe(name) == DEFAULT_REGISTRY.describe(name)
    assert DEFAULT_REGISTRY.describe("nosuchmethod") is None


def test_describe_carries_argument_metadata() -> None:
    getblock = DEFAULT_REGISTRY.describe("getblock")
    assert getblock is not None
    assert getblock.group is MethodGroup.BLOCKCHAIN
    assert getblock.arg_names == ("blockhash", "verbosity")
    assert getblock.args[0].required
    assert getblock.args[1].default == 1
    assert getblock.args[1].valid_values == (0, 1, 2)
    assert "verbosity" in getblock.description


def test_arg_count() -> None:
    assert DEFAULT_REGISTRY.arg_count("getbestblockhash") == 0
    assert DEFAULT_REGISTRY.arg_count("setban") == 4
    assert DEFAULT_REGISTRY.arg_count("nosuchmethod") is None


def test_min_args_counts_up_to_last_required() -> None:
    # prioritisetransaction(txid, dummy, fee_delta): dummy must be sent as null
    descriptor = DEFAULT_REGISTRY.describe("prioritisetransaction")
    assert descriptor.min_args == 3
    assert DEFAULT_REGISTRY.describe("walletcreatefundedpsbt").min_args == 2
    assert DEFAULT_REGISTRY.describe("getchaintxstats").min_args == 0


def test_check_arity() -> None:
    DEFAULT_REGISTRY.check_arity("getblock", ["00" * 32])
    DEFAULT_REGISTRY.check_arity("getblock", ["00" * 32, 2])
    with pytest.raises(InvalidArgumentsError, match="expected 1..2 params, got 0"):
        DEFAULT_REGISTRY.check_arity("getblock", [])
    with pytest.raises(InvalidArgumentsError, match="got 3"):
        DEFAULT_REGISTRY.check_arity("getblock", ["00" * 32, 2, True])
    with pytest.raises(InvalidArgumentsError, match="expected 0 params"):
        DEFAULT_REGISTRY.check_arity("getblockcount", [1])
    with pytest.raises(UnknownMethodError):
        DEFAULT_REGISTRY.check_arity("nosuchmethod", [])


def test_custom_registry_is_isolated_from_source_mapping() -> None:
    source = {"echo": MethodDescriptor("echo", MethodGroup.UTIL, "echo", (ArgumentSpec("value"),))}
    registry = MethodRegistry(source)
    source.clear()
    assert registry.exists("echo")
    assert registry.names() == ["echo"]
    assert not registry.exists("getblock")


class TestBind:
    def test_positional_only(self) -> None:
        assert DEFAULT_REGISTRY.describe("getblock").bind(("abc",)) == ["abc"]
        assert DEFAULT_REGISTRY.describe("getblock").bind(("abc", 0)) == ["abc", 0]

    def test_keyword_fills_gaps_with_defaults_or_null(self) -> None:
        gettxout = DEFAULT_REGISTRY.describe("gettxout")
        assert gettxout.bind(("tx", 1), {"include_mempool": False}) == ["tx", 1, False]

        listunspent = DEFAULT_REGISTRY.describe("listunspent")
        # minconf and maxconf have defaults, addresses has none -> null
        assert listunspent.bind((), {"include_unsafe": False}) == [1, 9999999, None, False]

    def test_trailing_optionals_are_omitted(self) -> None:
        assert DEFAULT_REGISTRY.describe("listunspent").bind(()) == []

    def test_required_after_optional(self) -> None:
        prioritise = DEFAULT_REGISTRY.describe("prioritisetransaction")
        assert prioritise.bind(("txid",), {"fee_delta": 1000}) == ["txid", None, 1000]

    def test_missing_required(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="missing required argument 'blockhash'"):
            DEFAULT_REGISTRY.describe("getblock").bind((), {"verbosity": 2})

    def test_unknown_keyword(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="unexpected keyword argument 'verbose'"):
            DEFAULT_REGISTRY.describe("getblock").bind(("abc",), {"verbose": True})

    def test_duplicate_value(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="multiple values"):
            DEFAULT_REGISTRY.describe("getblock").bind(("abc",), {"blockhash": "def"})

    def test_too_many_positional(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="at most 0"):
            DEFAULT_REGISTRY.describe("getblockcount").bind((1,))
