"""
Bitcoin Core RPC catalog.

Static table of every remote procedure the client knows about, grouped the
way `bitcoin-cli help` groups them. Built once at import, read-only after.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from btcrpc.registry.schema import NO_DEFAULT, ArgumentSpec, MethodDescriptor, MethodGroup

_LOGGING_CATEGORIES = (
    "net", "tor", "mempool", "http", "bench", "zmq", "walletdb", "rpc", "estimatefee",
    "addrman", "selectcoins", "reindex", "cmpctblock", "rand", "prune", "proxy",
    "mempoolrej", "libevent", "coindb", "qt", "leveldb", "validation", "all", "1", "none", "0",
)
_ESTIMATE_MODES = ("unset", "economical", "conservative")
_SIGHASH_TYPES = ("ALL", "NONE", "SINGLE", "ALL|ANYONECANPAY", "NONE|ANYONECANPAY", "SINGLE|ANYONECANPAY")
_ADDRESS_TYPES = ("legacy", "p2sh-segwit", "bech32")


def _req(name: str, valid_values: Any = None) -> ArgumentSpec:
    return ArgumentSpec(name, required=True, valid_values=valid_values)


def _opt(name: str, default: Any = NO_DEFAULT, valid_values: Any = None) -> ArgumentSpec:
    return ArgumentSpec(name, required=False, default=default, valid_values=valid_values)


_BLOCKCHAIN = [
    ("getbestblockhash", "Returns the hash of the best (tip) block in the most-work fully-validated chain.", ()),
    ("getblock", "Returns block data for 'blockhash': hex-encoded (verbosity 0), an object (1), or an object with transaction data (2).",
     (_req("blockhash", "hash"), _opt("verbosity", 1, (0, 1, 2)))),
    ("getblockchaininfo", "Returns an object containing various state info regarding blockchain processing.", ()),
    ("getblockcount", "Returns the height of the most-work fully-validated chain. The genesis block has height 0.", ()),
    ("getblockfilter", "Retrieve a BIP 157 content filter for a particular block.",
     (_req("blockhash", "hash"), _opt("filtertype", "basic", "string"))),
    ("getblockhash", "Returns hash of block in best-block-chain at height provided.", (_req("height", "number"),)),
    ("getblockheader", "Returns the block header for 'blockhash', as an object (verbose) or hex-encoded data.",
     (_req("blockhash", "hash"), _opt("verbose", True, "boolean"))),
    ("getblockstats", "Compute per block statistics for a given window. All amounts are in satoshis.",
     (_req("hash_or_height", "hash or number"), _opt("stats", valid_values="array of strings"))),
    ("getchaintips", "Return information about all known tips in the block tree, including the main chain as well as orphaned branches.", ()),
    ("getchaintxstats", "Compute statistics about the total number and rate of transactions in the chain.",
     (_opt("nblocks", valid_values="number"), _opt("blockhash", valid_values="hash"))),
    ("getdifficulty", "Returns the proof-of-work difficulty as a multiple of the minimum difficulty.", ()),
    ("getmempoolancestors", "If txid is in the mempool, returns all in-mempool ancestors.",
     (_req("txid", "hash"), _opt("verbose", False, "boolean"))),
    ("getmempooldescendants", "If txid is in the mempool, returns all in-mempool descendants.",
     (_req("txid", "hash"), _opt("verbose", False, "boolean"))),
    ("getmempoolentry", "Returns mempool data for given transaction.", (_req("txid", "hash"),)),
    ("getmempoolinfo", "Returns details on the active state of the TX memory pool.", ()),
    ("getrawmempool", "Returns all transaction ids in memory pool as a json array of string transaction ids.",
     (_opt("verbose", False, "boolean"), _opt("mempool_sequence", False, "boolean"))),
    ("gettxout", "Returns details about an unspent transaction output.",
     (_req("txid", "hash"), _req("n", "number"), _opt("include_mempool", True, "boolean"))),
    ("gettxoutproof", "Returns a hex-encoded proof that 'txid' was included in a block.",
     (_req("txids", "array of hashes"), _opt("blockhash", valid_values="hash"))),
    ("gettxoutsetinfo", "Returns statistics about the unspent transaction output set.",
     (_opt("hash_type", "hash_serialized_2", ("hash_serialized_2", "muhash", "none")),)),
    ("preciousblock", "Treats a block as if it were received before others with the same work.", (_req("blockhash", "hash"),)),
    ("pruneblockchain", "Prunes the blockchain up to a specified height.", (_req("height", "number"),)),
    ("savemempool", "Dumps the mempool to disk. It will fail until the previous dump is fully loaded.", ()),
    ("scantxoutset", "EXPERIMENTAL. Scans the unspent transaction output set for entries that match certain output descriptors.",
     (_req("action", ("start", "abort", "status")), _opt("scanobjects", valid_values="array"))),
    ("verifychain", "Verifies blockchain database.",
     (_opt("checklevel", 3, (0, 1, 2, 3, 4)), _opt("nblocks", 6, "number"))),
    ("verifytxoutproof", "Verifies that a proof points to a transaction in a block, returning the transaction it commits to.",
     (_req("proof", "hex"),)),
]

_CONTROL = [
    ("getmemoryinfo", "Returns an object containing information about memory usage.",
     (_opt("mode", "stats", ("stats", "mallocinfo")),)),
    ("getrpcinfo", "Returns details of the RPC server.", ()),
    ("help", "List all commands, or get help for a specified command.", (_opt("command", valid_values="string"),)),
    ("logging", "Gets and sets the logging configuration.",
     (_opt("include", valid_values=_LOGGING_CATEGORIES), _opt("exclude", valid_values=_LOGGING_CATEGORIES))),
    ("stop", "Request a graceful shutdown of Bitcoin Core.", ()),
    ("uptime", "Returns the total uptime of the server.", ()),
]

_GENERATING = [
    ("generateblock", "Mine a block with a set of ordered transactions immediately to a specified address or descriptor.",
     (_req("output", "address or descriptor"), _req("transactions", "array of txids or raw transactions"))),
    ("generatetoaddress", "Mine blocks immediately to a specified address.",
     (_req("nblocks", "number"), _req("address", "string"), _opt("maxtries", 1000000, "number"))),
    ("generatetodescriptor", "Mine blocks immediately to a specified descriptor.",
     (_req("num_blocks", "number"), _req("descriptor", "string"), _opt("maxtries", 1000000, "number"))),
]

_MINING = [
    ("getblocktemplate", "Returns data needed to construct a block to work on.",
     (_opt("template_request", valid_values="object"),)),
    ("getmininginfo", "Returns a json object containing mining-related information.", ()),
    ("getnetworkhashps", "Returns the estimated network hashes per second based on the last n blocks.",
     (_opt("nblocks", 120, "number"), _opt("height", -1, "number"))),
    ("prioritisetransaction", "Accepts the transaction into mined blocks at a higher (or lower) priority.",
     (_req("txid", "hash"), _opt("dummy", valid_values="null or 0"), _req("fee_delta", "number"))),
    ("submitblock", "Attempts to submit new block to network.", (_req("hexdata", "hex"), _opt("dummy"))),
    ("submitheader", "Decode the given hexdata as a header and submit it as a candidate chain tip if valid.",
     (_req("hexdata", "hex"),)),
]

_NETWORK = [
    ("addnode", "Attempts to add or remove a node from the addnode list, or try a connection to a node once.",
     (_req("node", "string"), _req("command", ("add", "remove", "onetry")))),
    ("clearbanned", "Clear all banned IPs.", ()),
    ("disconnectnode", "Immediately disconnects from the specified peer node, identified by address or nodeid.",
     (_opt("address", valid_values="string"), _opt("nodeid", valid_values="number"))),
    ("getaddednodeinfo", "Returns information about the given added node, or all added nodes.",
     (_opt("node", valid_values="string"),)),
    ("getconnectioncount", "Returns the number of connections to other nodes.", ()),
    ("getnettotals", "Returns information about network traffic, including bytes in, bytes out, and current time.", ()),
    ("getnetworkinfo", "Returns an object containing various state info regarding P2P networking.", ()),
    ("getnodeaddresses", "Return known addresses which can potentially be used to find new nodes in the network.",
     (_opt("count", 1, "number"),)),
    ("getpeerinfo", "Returns data about each connected network node as a json array of objects.", ()),
    ("listbanned", "List all manually banned IPs/Subnets.", ()),
    ("ping", "Requests that a ping be sent to all other nodes, to measure ping time.", ()),
    ("setban", "Attempts to add or remove an IP/Subnet from the banned list.",
     (_req("subnet", "ip/subnet"), _req("command", ("add", "remove")), _opt("bantime", 0, "number"),
      _opt("absolute", False, "boolean"))),
    ("setnetworkactive", "Disable/enable all p2p network activity.", (_req("state", "boolean"),)),
]

_RAWTRANSACTIONS = [
    ("analyzepsbt", "Analyzes and provides information about the current status of a PSBT and its inputs.",
     (_req("psbt", "base64"),)),
    ("combinepsbt", "Combine multiple partially signed Bitcoin transactions into one transaction.",
     (_req("txs", "array of base64 strings"),)),
    ("combinerawtransaction", "Combine multiple partially signed transactions into one transaction.",
     (_req("txs", "array of hex strings"),)),
    ("converttopsbt", "Converts a network serialized transaction to a PSBT.",
     (_req("hexstring", "hex"), _opt("permitsigdata", False, "boolean"), _opt("iswitness", valid_values="boolean"))),
    ("createpsbt", "Creates a transaction in the Partially Signed Transaction format.",
     (_req("inputs", "array"), _req("outputs", "array"), _opt("locktime", 0, "number"),
      _opt("replaceable", False, "boolean"))),
    ("createrawtransaction", "Create a transaction spending the given inputs and creating new outputs.",
     (_req("inputs", "array"), _req("outputs", "array"), _opt("locktime", 0, "number"),
      _opt("replaceable", False, "boolean"))),
    ("decodepsbt", "Return a JSON object representing the serialized, base64-encoded partially signed Bitcoin transaction.",
     (_req("psbt", "base64"),)),
    ("decoderawtransaction", "Return a JSON object representing the serialized, hex-encoded transaction.",
     (_req("hexstring", "hex"), _opt("iswitness", valid_values="boolean"))),
    ("decodescript", "Decode a hex-encoded script.", (_req("hexstring", "hex"),)),
    ("finalizepsbt", "Finalize the inputs of a PSBT, extracting a network serialized transaction when complete.",
     (_req("psbt", "base64"), _opt("extract", True, "boolean"))),
    ("fundrawtransaction", "Add inputs to a transaction until it has enough in value to meet its out value.",
     (_req("hexstring", "hex"), _opt("options", valid_values="object"), _opt("iswitness", valid_values="boolean"))),
    ("getrawtransaction", "Return the raw transaction data.",
     (_req("txid", "hash"), _opt("verbose", False, "boolean"), _opt("blockhash", valid_values="hash"))),
    ("joinpsbts", "Joins multiple distinct PSBTs with different inputs and outputs into one PSBT.",
     (_req("txs", "array of base64 strings"),)),
    ("sendrawtransaction", "Submit a raw transaction (serialized, hex-encoded) to local node and network.",
     (_req("hexstring", "hex"), _opt("maxfeerate", 0.10, "number"))),
    ("signrawtransactionwithkey", "Sign inputs for raw transaction using only the given base58-encoded private keys.",
     (_req("hexstring", "hex"), _req("privkeys", "array of strings"), _opt("prevtxs", valid_values="array"),
      _opt("sighashtype", "ALL", _SIGHASH_TYPES))),
    ("testmempoolaccept", "Returns result of mempool acceptance tests indicating if raw transactions would be accepted by mempool.",
     (_req("rawtxs", "array of hex strings"), _opt("maxfeerate", 0.10, "number"))),
    ("utxoupdatepsbt", "Updates all segwit inputs and outputs in a PSBT with data from output descriptors, the UTXO set or the mempool.",
     (_req("psbt", "base64"), _opt("descriptors", valid_values="array"))),
]

_UTIL = [
    ("createmultisig", "Creates a multi-signature address with n signature of m keys required.",
     (_req("nrequired", "number"), _req("keys", "array of hex strings"), _opt("address_type", "legacy", _ADDRESS_TYPES))),
    ("deriveaddresses", "Derives one or more addresses corresponding to an output descriptor.",
     (_req("descriptor", "string"), _opt("range", valid_values="number or [begin, end]"))),
    ("estimatesmartfee", "Estimates the approximate fee per kilobyte needed for a transaction to begin confirmation within conf_target blocks.",
     (_req("conf_target", "number"), _opt("estimate_mode", "conservative", _ESTIMATE_MODES))),
    ("getdescriptorinfo", "Analyses a descriptor.", (_req("descriptor", "string"),)),
    ("getindexinfo", "Returns the status of one or all available indices currently running in the node.",
     (_opt("index_name", valid_values="string"),)),
    ("signmessagewithprivkey", "Sign a message with the private key of an address.",
     (_req("privkey", "string"), _req("message", "string"))),
    ("validateaddress", "Return information about the given bitcoin address.", (_req("address", "string"),)),
    ("verifymessage", "Verify a signed message.",
     (_req("address", "string"), _req("signature", "base64"), _req("message", "string"))),
]

_WALLET = [
    ("abandontransaction", "Mark in-wallet transaction <txid> as abandoned.", (_req("txid", "hash"),)),
    ("abortrescan", "Stops current wallet rescan triggered by an RPC call.", ()),
    ("addmultisigaddress", "Add an nrequired-to-sign multisignature address to the wallet.",
     (_req("nrequired", "number"), _req("keys", "array of strings"), _opt("label", valid_values="string"),
      _opt("address_type", valid_values=_ADDRESS_TYPES))),
    ("backupwallet", "Safely copies current wallet file to destination.", (_req("destination", "string"),)),
    ("bumpfee", "Bumps the fee of an opt-in-RBF transaction, replacing it with a new transaction.",
     (_req("txid", "hash"), _opt("options", valid_values="object"))),
    ("createwallet", "Creates and loads a new wallet.",
     (_req("wallet_name", "string"), _opt("disable_private_keys", False, "boolean"), _opt("blank", False, "boolean"),
      _opt("passphrase", valid_values="string"), _opt("avoid_reuse", False, "boolean"),
      _opt("descriptors", False, "boolean"), _opt("load_on_startup", valid_values="boolean"))),
    ("dumpprivkey", "Reveals the private key corresponding to 'address'.", (_req("address", "string"),)),
    ("dumpwallet", "Dumps all wallet keys in a human-readable format to a server-side file.", (_req("filename", "string"),)),
    ("encryptwallet", "Encrypts the wallet with 'passphrase'. This is for first time encryption.",
     (_req("passphrase", "string"),)),
    ("getaddressesbylabel", "Returns the list of addresses assigned the specified label.", (_req("label", "string"),)),
    ("getaddressinfo", "Return information about the given bitcoin address.", (_req("address", "string"),)),
    ("getbalance", "Returns the total available balance.",
     (_opt("dummy", valid_values="'*'"), _opt("minconf", 0, "number"), _opt("include_watchonly", valid_values="boolean"),
      _opt("avoid_reuse", True, "boolean"))),
    ("getbalances", "Returns an object with all balances in BTC.", ()),
    ("getnewaddress", "Returns a new Bitcoin address for receiving payments.",
     (_opt("label", "", "string"), _opt("address_type", valid_values=_ADDRESS_TYPES))),
    ("getrawchangeaddress", "Returns a new Bitcoin address, for receiving change.",
     (_opt("address_type", valid_values=_ADDRESS_TYPES),)),
    ("getreceivedbyaddress", "Returns the total amount received by the given address in transactions with at least minconf confirmations.",
     (_req("address", "string"), _opt("minconf", 1, "number"))),
    ("getreceivedbylabel", "Returns the total amount received by addresses with <label> in transactions with at least [minconf] confirmations.",
     (_req("label", "string"), _opt("minconf", 1, "number"))),
    ("gettransaction", "Get detailed information about in-wallet transaction <txid>.",
     (_req("txid", "hash"), _opt("include_watchonly", valid_values="boolean"), _opt("verbose", False, "boolean"))),
    ("getunconfirmedbalance", "DEPRECATED. Identical to getbalances().mine.untrusted_pending.", ()),
    ("getwalletinfo", "Returns an object containing various wallet state info.", ()),
    ("importaddress", "Adds an address or script (in hex) that can be watched as if it were in your wallet but cannot be used to spend.",
     (_req("address", "string"), _opt("label", "", "string"), _opt("rescan", True, "boolean"), _opt("p2sh", False, "boolean"))),
    ("importdescriptors", "Import descriptors, rescanning from the earliest timestamp of all descriptors being imported.",
     (_req("requests", "array"),)),
    ("importmulti", "Import addresses/scripts (with private or public keys, redeem script (P2SH)), optionally rescanning the blockchain.",
     (_req("requests", "array"), _opt("options", valid_values="object"))),
    ("importprivkey", "Adds a private key (as returned by dumpprivkey) to your wallet.",
     (_req("privkey", "string"), _opt("label", valid_values="string"), _opt("rescan", True, "boolean"))),
    ("importprunedfunds", "Imports funds without rescan. Aimed towards pruned wallets.",
     (_req("rawtransaction", "hex"), _req("txoutproof", "hex"))),
    ("importpubkey", "Adds a public key (in hex) that can be watched as if it were in your wallet but cannot be used to spend.",
     (_req("pubkey", "hex"), _opt("label", "", "string"), _opt("rescan", True, "boolean"))),
    ("importwallet", "Imports keys from a wallet dump file (see dumpwallet).", (_req("filename", "string"),)),
    ("keypoolrefill", "Fills the keypool.", (_opt("newsize", 100, "number"),)),
    ("listaddressgroupings", "Lists groups of addresses which have had their common ownership made public by common use.", ()),
    ("listlabels", "Returns the list of all labels, or labels that are assigned to addresses with a specific purpose.",
     (_opt("purpose", valid_values=("send", "receive")),)),
    ("listlockunspent", "Returns list of temporarily unspendable outputs.", ()),
    ("listreceivedbyaddress", "List balances by receiving address.",
     (_opt("minconf", 1, "number"), _opt("include_empty", False, "boolean"), _opt("include_watchonly", valid_values="boolean"),
      _opt("address_filter", valid_values="string"))),
    ("listreceivedbylabel", "List received transactions by label.",
     (_opt("minconf", 1, "number"), _opt("include_empty", False, "boolean"), _opt("include_watchonly", valid_values="boolean"))),
    ("listsinceblock", "Get all transactions in blocks since block [blockhash], or all transactions if omitted.",
     (_opt("blockhash", valid_values="hash"), _opt("target_confirmations", 1, "number"),
      _opt("include_watchonly", valid_values="boolean"), _opt("include_removed", True, "boolean"))),
    ("listtransactions", "Returns up to 'count' most recent transactions skipping the first 'skip' transactions.",
     (_opt("label", valid_values="string"), _opt("count", 10, "number"), _opt("skip", 0, "number"),
      _opt("include_watchonly", valid_values="boolean"))),
    ("listunspent", "Returns array of unspent transaction outputs with between minconf and maxconf (inclusive) confirmations.",
     (_opt("minconf", 1, "number"), _opt("maxconf", 9999999, "number"), _opt("addresses", valid_values="array of strings"),
      _opt("include_unsafe", True, "boolean"), _opt("query_options", valid_values="object"))),
    ("listwalletdir", "Returns a list of wallets in the wallet directory.", ()),
    ("listwallets", "Returns a list of currently loaded wallets.", ()),
    ("loadwallet", "Loads a wallet from a wallet file or directory.",
     (_req("filename", "string"), _opt("load_on_startup", valid_values="boolean"))),
    ("lockunspent", "Updates list of temporarily unspendable outputs.",
     (_req("unlock", "boolean"), _opt("transactions", valid_values="array"))),
    ("psbtbumpfee", "Bumps the fee of an opt-in-RBF transaction, returning a PSBT instead of broadcasting.",
     (_req("txid", "hash"), _opt("options", valid_values="object"))),
    ("removeprunedfunds", "Deletes the specified transaction from the wallet. Companion to importprunedfunds.",
     (_req("txid", "hash"),)),
    ("rescanblockchain", "Rescan the local blockchain for wallet related transactions.",
     (_opt("start_height", 0, "number"), _opt("stop_height", valid_values="number"))),
    ("send", "EXPERIMENTAL. Send a transaction.",
     (_req("outputs", "array"), _opt("conf_target", valid_values="number"), _opt("estimate_mode", "unset", _ESTIMATE_MODES),
      _opt("fee_rate", valid_values="number"), _opt("options", valid_values="object"))),
    ("sendmany", "Send multiple times. Amounts are double-precision floating point numbers.",
     (_req("dummy", "''"), _req("amounts", "object"), _opt("minconf", valid_values="number"),
      _opt("comment", valid_values="string"), _opt("subtractfeefrom", valid_values="array"),
      _opt("replaceable", valid_values="boolean"), _opt("conf_target", valid_values="number"),
      _opt("estimate_mode", "unset", _ESTIMATE_MODES), _opt("fee_rate", valid_values="number"))),
    ("sendtoaddress", "Send an amount to a given address.",
     (_req("address", "string"), _req("amount", "number"), _opt("comment", valid_values="string"),
      _opt("comment_to", valid_values="string"), _opt("subtractfeefromamount", False, "boolean"),
      _opt("replaceable", valid_values="boolean"), _opt("conf_target", valid_values="number"),
      _opt("estimate_mode", "unset", _ESTIMATE_MODES), _opt("avoid_reuse", True, "boolean"),
      _opt("fee_rate", valid_values="number"), _opt("verbose", False, "boolean"))),
    ("sethdseed", "Set or generate a new HD wallet seed.",
     (_opt("newkeypool", True, "boolean"), _opt("seed", valid_values="WIF private key"))),
    ("setlabel", "Sets the label associated with the given address.", (_req("address", "string"), _req("label", "string"))),
    ("settxfee", "Set the transaction fee per kB for this wallet.", (_req("amount", "number"),)),
    ("setwalletflag", "Change the state of the given wallet flag for a wallet.",
     (_req("flag", "string"), _opt("value", True, "boolean"))),
    ("signmessage", "Sign a message with the private key of an address.",
     (_req("address", "string"), _req("message", "string"))),
    ("signrawtransactionwithwallet", "Sign inputs for raw transaction (serialized, hex-encoded).",
     (_req("hexstring", "hex"), _opt("prevtxs", valid_values="array"), _opt("sighashtype", "ALL", _SIGHASH_TYPES))),
    ("unloadwallet", "Unloads the wallet referenced by the request endpoint, otherwise the wallet specified in the argument.",
     (_opt("wallet_name", valid_values="string"), _opt("load_on_startup", valid_values="boolean"))),
    ("upgradewallet", "Upgrade the wallet. Upgrades to the latest version if no version number is specified.",
     (_opt("version", valid_values="number"),)),
    ("walletcreatefundedpsbt", "Creates and funds a transaction in the Partially Signed Transaction format.",
     (_opt("inputs", valid_values="array"), _req("outputs", "array"), _opt("locktime", 0, "number"),
      _opt("options", valid_values="object"), _opt("bip32derivs", True, "boolean"))),
    ("walletlock", "Removes the wallet encryption key from memory, locking the wallet.", ()),
    ("walletpassphrase", "Stores the wallet decryption key in memory for 'timeout' seconds.",
     (_req("passphrase", "string"), _req("timeout", "number"))),
    ("walletpassphrasechange", "Changes the wallet passphrase from 'oldpassphrase' to 'newpassphrase'.",
     (_req("oldpassphrase", "string"), _req("newpassphrase", "string"))),
    ("walletprocesspsbt", "Update a PSBT with input information from our wallet and then sign inputs that we can sign for.",
     (_req("psbt", "base64"), _opt("sign", True, "boolean"), _opt("sighashtype", "ALL", _SIGHASH_TYPES),
      _opt("bip32derivs", True, "boolean"))),
]


def _build(groups: dict[MethodGroup, list[tuple[str, str, tuple[ArgumentSpec, ...]]]]) -> Mapping[str, MethodDescriptor]:
    table: dict[str, MethodDescriptor] = {}
    for group, entries in groups.items():
        for name, description, args in entries:
            if name in table:
                raise ValueError(f"duplicate RPC method in catalog: {name}")
            table[name] = MethodDescriptor(name=name, group=group, description=description, args=tuple(args))
    return MappingProxyType(table)


BITCOIN_CORE_METHODS: Mapping[str, MethodDescriptor] = _build(
    {
        MethodGroup.BLOCKCHAIN: _BLOCKCHAIN,
        MethodGroup.CONTROL: _CONTROL,
        MethodGroup.GENERATING: _GENERATING,
        MethodGroup.MINING: _MINING,
        MethodGroup.NETWORK: _NETWORK,
        MethodGroup.RAWTRANSACTIONS: _RAWTRANSACTIONS,
        MethodGroup.UTIL: _UTIL,
        MethodGroup.WALLET: _WALLET,
    }
)
