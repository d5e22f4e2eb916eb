# clmmstate

`clmmstate` models the state accounts of a concentrated-liquidity market
maker in plain Python objects. It covers pools, positions, position bundles,
tick arrays and the configuration accounts around them. Each object enforces
the exchange's validation rules. A rule violation raises
`clmmstate.errors.DexError`, and the error's `code` attribute holds an
`ErrorCode` member.

## Modules

- `clmmstate.errors` defines `ErrorCode`, an enum whose members carry a `message`. It also defines `DexError(code, detail=None)`.
- `clmmstate.config` defines `PoolsConfig`. It holds the fee, protocol-fee-collection and reward-emissions authorities, and the default protocol fee rate. A protocol fee rate above `MAX_PROTOCOL_FEE_RATE` (2500) is rejected.
- `clmmstate.config_extension` defines `PoolsConfigExtension`. It holds the config-extension and token-badge authorities.
- `clmmstate.fee_tier` defines `FeeTier`. It pairs a tick spacing with a default fee rate, and a fee rate above `MAX_FEE_RATE` (30000) is rejected.
- `clmmstate.token_badge` defines `TokenBadge`, which ties a token mint to a pools config.
- `clmmstate.pool` covers the pool itself:
  - `Pool` has token mint and vault selection by swap direction, `seeds()`, and `initialize_reward`, which fills the lowest unused reward slot only.
  - Its other methods are reward, emission and authority updates, fee-rate checks, `update_after_swap` and `reset_protocol_fees_owed`.
  - The module also defines `PoolRewardInfo`, `PoolBumps` and `NUM_REWARDS` (3).
- `clmmstate.position` defines `Position`, with `open_position`, `update`, `is_position_empty`, `reset_fees_owed` and `update_reward_owed`. It also defines `PositionUpdate`, `PositionRewardInfo`, `OpenPositionBumps` and `OpenPositionWithMetadataBumps`.
- `clmmstate.position_bundle` defines `PositionBundle`, a 256-slot bitmap of bundled positions. Its methods are `open_bundled_position`, `close_bundled_position`, `is_open` and `is_deletable`.
- `clmmstate.tick` defines `Tick`, `TickUpdate` and `TickArray`, along with `get_offset` and the tick constants (`MIN_TICK_INDEX`, `MAX_TICK_INDEX`, `TICK_ARRAY_SIZE`). It provides these operations:
  - checking tick-index bounds, usable ticks and valid start ticks;
  - reading and updating a tick within an array;
  - searching one array for the next initialized tick.
- `clmmstate.swap_tick_sequence` defines `SwapTickSequence`, an ordered run of up to three tick arrays. The sequence holds the arrays by reference. It offers `get_tick`, `update_tick` and `get_tick_offset` by array index.
- `clmmstate.tick_search` defines `get_next_initialized_tick_index(sequence, tick_index, tick_spacing, a_to_b, start_array_index)`. It walks a sequence and returns `(array_index, tick_index)`. When no initialized tick is found, it stops at the minimum or maximum tick index, or else at the edge of the last array.
- `clmmstate.authority` defines `verify_position_authority` and `verify_position_bundle_authority`. Both check a `Signer` against the owner or the single-token delegate of a `TokenAccount`. The module also defines `to_timestamp_u64`, which rejects negative timestamps.
- `clmmstate.remaining_accounts` defines `parse_remaining_accounts`. It splits a list of extra accounts into the typed groups of a `ParsedRemainingAccounts`. A `RemainingAccountsInfo` lists the groups in order as `RemainingAccountsSlice` items, and `AccountsType` names the kind of each group.

Public keys are plain 32-byte `bytes` values, and the all-zero key means "unset".

## Example

```python
from clmmstate.errors import DexError, ErrorCode
from clmmstate.tick import Tick, TickArray, TickUpdate
from clmmstate.swap_tick_sequence import SwapTickSequence
from clmmstate.tick_search import get_next_initialized_tick_index

array = TickArray(start_tick_index=0)
array.update_tick(80, 8, TickUpdate(initialized=True, liquidity_net=1500))

sequence = SwapTickSequence(array)
array_index, tick_index = get_next_initialized_tick_index(sequence, -7, 8, False, 0)
assert (array_index, tick_index) == (0, 80)

assert Tick.check_is_usable_tick(704, 8)

try:
    array.get_tick(81, 8)
except DexError as err:
    assert err.code is ErrorCode.TickNotFound
```

## What it does not do

This package only keeps state and checks rules. It does not do any of the following:

- compute swap amounts or price math; in particular it does not convert between sqrt price and tick index;
- move tokens or apply token transfer fees;
- serialize accounts to or from their on-chain byte layout; the `LEN` class attributes only record those sizes;
- provide a command-line tool or a server.

## Tests

```
pip install -e .[test]
pytest
```