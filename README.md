# tinkerbox

A collection of small, self-contained tools and data structures. Everything is
written against the Python standard library alone (Python 3.10 or later).

To run the test suite, install the test extra:

```
pip install tinkerbox[test]
pytest
```

## Brazilian identifiers: `tinkerbox.brid`

Parse, validate and complete CPF and CNPJ numbers. The formatting characters
`.`, `/` and `-` are skipped wherever they appear; CNPJ letters are accepted in
either case and stored upper-case.

```python
from tinkerbox.brid.ids import CPF, CNPJ, UncheckedCPF
from tinkerbox.brid.errors import DocumentError, WrongCheckDigits

cpf = CPF.parse("11144477735")
str(cpf)                          # "111.444.777-35"
str(cpf.check_digits())           # "35"
str(cpf.without_check_digits())   # "111.444.777"
cpf.chars()                       # ('1', '1', '1', '4', ...)

str(UncheckedCPF.parse("111.444.777").with_check_digits())  # "111.444.777-35"

str(CNPJ.parse("12.AbC.345/01De-35"))  # "12.ABC.345/01DE-35"

try:
    CPF.parse("111.444.777-05")
except WrongCheckDigits:
    ...
```

`from_chars(iterable)` reads from any iterable of characters, `parse(text)` from
a string. Every failure raises a subclass of `DocumentError` (itself a
`ValueError`): `WrongNumberOfDigits`, `InvalidCharError` and
`InvalidCheckDigitCharError` (both carrying an `InvalidChar` with the character
and its index), and `WrongCheckDigits`. Error messages are in Portuguese.

`tinkerbox.brid.check_digits` exposes the modulo-11 calculation itself:
`cpf_check_digits(digits)`, `cnpj_check_digits(digits)` and
`calculate_check_digits(digits, max_weight, initial_weight)`.

The `brid` command validates identifiers or computes their check digits:

```
brid valida-cpf 111.444.777-35
brid valida-cnpj 12.ABC.345/01DE-35
brid calcula-cpf 111.444.777
brid calcula-cnpj 12.ABC.345/01DE
```

Each input is printed followed by `Válido` and its formatted form, or by
`Inválido` and the reason. The verdict is coloured unless the `NO_COLOR`
environment variable is set.

## AVL tree: `tinkerbox.avl`

A self-balancing ordered map that also serves as a set (`AVLTreeMap` and
`AVLTreeSet` are other names for `AVLTree`). Keys must be comparable with `<`
and `==`.

```python
from tinkerbox.avl import AVLTree

tree = AVLTree()
tree.set("B", 2)           # returns the replaced value, or None
tree.set("A", 1)
tree.get("A")              # 1 (None when the key is absent)
tree.unset("B")            # ("B", 2), or None when the key is absent
"A" in tree                # True
len(tree)                  # 1
list(tree)                 # in-order (key, value) pairs
list(tree.breadth_iter())  # level-order (key, value) pairs

names = AVLTree()
names.add("x")             # True when newly added
names.remove("x")          # True when it was present
```

## Approximate distinct counting: `tinkerbox.approximate`

Estimates how many distinct values a stream holds while keeping at most a fixed
number of them in memory.

```python
from tinkerbox.approximate import ApproximateCountDistinct, Params

counter = ApproximateCountDistinct.with_max_set_size(50)
counter.see_many(range(1, 101))
counter.approximate_count_distinct()   # an estimate around 100

params = Params.with_max_set_size(10).set_factor_adjustment(0.1)
counter = ApproximateCountDistinct(params, rng=random.Random(0))
```

`Params` is immutable; `set_max_set_size`, `set_factor` and
`set_factor_adjustment` return validated copies and raise `ValueError` on out of
range values. `counter.params` shows the current parameters, whose `factor`
drops each time the sample is thinned out.

The `approximate-count-distinct` command prints the average estimate for 100
distinct values under several parameter settings. Options: `--seed N` for a
reproducible run, `--runs N` for the number of runs averaged (default 100).

## Deterministic weighted choice: `tinkerbox.chooser`

Endless iterators that pick values so that their running counts follow the
given weights as closely as possible (by cosine similarity), with no
randomness. Ties go to the last item.

```python
from tinkerbox.chooser import DeterministicChooser, DeterministicBoolChooser

chooser = DeterministicChooser([("a", 5.0), ("b", 3.0), ("c", 2.0)])
picks = [next(chooser) for _ in range(10)]
chooser.stats()        # [(value, ItemStats(weight, count)), ...]

coin = DeterministicBoolChooser(0.25)
flips = [next(coin) for _ in range(8)]
coin.stats()           # BoolStats(trues=..., total=...)
```

`RawDeterministicChooser(weights)` yields item indexes instead of values.
Weights must be non-negative and at least one must be positive; otherwise
`ValueError` is raised. The `deterministic-chooser` command prints a
demonstration; `--seed N` fixes the random weights used in one of its examples.

## Floating-point explorer: `tinkerbox.floatx`

Shows how an IEEE 754 single- or double-precision value is laid out: its bits
(coloured by sign, exponent and fraction), bytes in hexadecimal and decimal,
category, sign, exponent and fraction.

```
floatx single 1.5
floatx double -1.2b-3
floatx single h:96b6:25a5
floatx double 150,182,37,165,150,182,37,165
floatx single -inf
floatx double smallest_subnormal
floatx --help
```

Values may be given as binary (`b...`), hexadecimal (`h...` or `x...`), with
`:` allowed as a visual separator, as comma-separated decimal bytes, as a
decimal mantissa with an optional `e` (base 10) or `b` (base 2) exponent, as
`nan`, or as a named value (`inf`, `largest`, `largest_normal`,
`smallest_normal`, `largest_subnormal`, `smallest`, `smallest_subnormal`, `pi`,
`e`), optionally signed. Arguments are case-insensitive. Bad arguments print an
error to standard error and exit with status 1.

From Python:

```python
from tinkerbox.floatx.formats import SINGLE, DOUBLE
from tinkerbox.floatx.parsing import parse_value
from tinkerbox.floatx.explorer import explore

value = parse_value("-1.2b-3", DOUBLE)
print(explore(value, DOUBLE))

SINGLE.to_bits(1.0)        # 0x3f800000
SINGLE.classify(1e-40)     # FpCategory.SUBNORMAL
```

`FloatFormat` also offers `from_bits`, `to_be_bytes`, `from_be_bytes` and
`round` (to the nearest value the format can hold). `tinkerbox.floatx.bits`
holds `Bits`, `mask` and `bit_groups`; `tinkerbox.floatx.ansi` the colouring
helpers.

## Dice probabilities: `tinkerbox.dice`

Prints the chance of each total when rolling a number of dice, with the
cumulative chances of rolling at most and at least that total.

```
dice-probabilities 3        # three six-sided dice
dice-probabilities 2 10     # two ten-sided dice
```

Both numbers must be between 1 and 255. From Python, `distribution(dices, faces)`
maps each total to the number of rolls giving it, and
`render_table(dices, faces)` returns the table as text.

## Copy on write: `tinkerbox.clone_on_mut`

`CloneOnMut.borrow(value)` wraps a value without copying it; the first call to
`get_mut()` or `into_owned()` replaces it with a deep copy, so the original is
never changed. `CloneOnMut.own(value)` wraps a value that is already owned.
`get()` reads without copying, `clone()` returns a new holder borrowing the
same value, and holders compare, order and hash by their values.

## Closures with explicit captures: `tinkerbox.closures`

`EmulatedFnOnce`, `EmulatedFnMut` and `EmulatedFn` bundle a tuple of captured
values with a body, which is called with the captures tuple followed by the
call's arguments.

```python
from tinkerbox.closures import EmulatedFn

double = EmulatedFn((), lambda caps, n: 2 * n)
double.call(7)                           # 14

length = EmulatedFn((), lambda caps, s: len(s))
to_text = EmulatedFn((), lambda caps, c: str(c))
length.compose(to_text).call("@")        # 1
```

`call_once` consumes any of them; calling it again raises `ConsumedError`.
`EmulatedFnMut` adds `call_mut` and `EmulatedFn` adds `call`, both repeatable.
`second.compose(first)` feeds the result of `first` into `second` and is only
as capable as the less capable of the two.