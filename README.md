# simplemath

Building blocks for a small symbolic math language. The package holds expression trees, a one-step evaluator, TeX and Wolfram Language rendering, and arbitrary-precision number-theory helpers. It uses only the standard library.

## Modules

- `simplemath.basic` covers elementary number theory on Python integers: `power_iu`, `extended_gcd2`, `modulo_inverse`, `modulo_division`, `is_coprime` and `chinese_remainder`.
- `simplemath.gamma` has `factorial_fold_u`. It also has `factorial_i`, which raises `ComplexInfinity` for negative input.
- `simplemath.fibonacci` has `fibonacci_fold_u`, which iterates, and `fibonacci_fast_u`, which uses memoised index doubling. It also has `fibonacci_i`, which accepts negative indices.
- `simplemath.primes` has `prime_count_i`, which answers only for the tabulated powers of ten from 1 to 10^27. `prime_sum_u64` computes a prime sum with a sieve over the range 1 to 2^64 - 1. `prime_sum_i` looks up the powers of ten from 1 to 10^25 and otherwise uses the sieve.
- `simplemath.ast` defines the expression tree:
  - the names: `Symbol`, with `Symbol.parse("a::b::name")`, plus `SymbolKind` and `OperatorKind`;
  - call structure: `Parameter` and `Position`;
  - the node classes, all derived from `AST`: `EmptyStatement`, `Program`, `Function`, `Boolean`, `Integer`, `Decimal`, `SymbolAtom` and `StringAtom`;
  - `Expression`, and the helpers `integer`, `decimal`, `symbol`, `string`, `is_unary` and `is_multiary`.

  Nodes are frozen, hashable and ordered. `str()` on an operator call gives its infix, prefix or suffix display form.
- `simplemath.ops` turns operator text into operator symbols with `prefix_map`, `infix_map` and `suffix_map`. For example, `infix_map("+")` is `std::infix::add` with precedence 80.
- `simplemath.internal` holds the built-in functions on nodes: `factorial`, `fibonacci`, `prime_sum`, `head`, `length`, `first` and `last`.
- `simplemath.evaluate` has `Context` and `forward(node, ctx)`. `forward` evaluates calls named `first`, `last`, `length`, `factorial`, `fibonacci`, `plus`, `times` and `power`, with integer arguments for the arithmetic ones. `rewrite(node)` returns the node unchanged.
- `simplemath.tex` provides `to_tex`, together with `height`, `width`, `infix_tex` and `omit_brackets_function`.
- `simplemath.wolfram` provides `to_wolfram_string` and `function_map`. `function_map` capitalises a symbol's name, with the exception that `factor` becomes `FactorInteger`.

## Errors

Failures raise exceptions from `simplemath.errors`.

- The number-theory functions raise subclasses of `AlgorithmError`: `Overflow`, `ComplexInfinity`, `AlgorithmIOError`, `Unimplemented`, `Indeterminate` and `Undefined`.
- The tree, evaluation and rendering code raises subclasses of `SMError`: `SMIOError`, `ParseError`, `EmptyContainerError`, `SMOverflow`, `SMInfinity`, `SMComplexInfinity`, `SMUnimplemented` and `SMUnreachable`.

`from_algorithm` converts an `AlgorithmError` into the matching `SMError`.

## Install

```
pip install .
```

## Example

```python
from simplemath.ast import Function, Parameter, Symbol, integer, symbol
from simplemath.evaluate import Context, forward
from simplemath.fibonacci import fibonacci_i
from simplemath.gamma import factorial_i
from simplemath.ops import infix_map
from simplemath.primes import prime_sum_u64
from simplemath.wolfram import to_wolfram_string

fibonacci_i(100)      # 354224848179261915075
factorial_i(10)       # 3628800
prime_sum_u64(1000)   # 76127

expr = Function(infix_map("+"), (Parameter((integer(1), symbol("x"))),))
print(expr)                    # 1+x
to_wolfram_string(expr)        # 'Add[1,x]'

call = Function(Symbol.parse("plus"), (Parameter((integer(1), integer(2))),))
forward(call, Context())       # Integer(value=3)
```

## What it does not do

- There is no parser. Trees are built in Python from the node classes and the `ops` helpers, not read from text.
- There is no interactive session and no command-line program. `Context` only holds state for `forward`.
- Evaluation covers just the built-ins listed above. Any other call raises `SMUnimplemented`.

## Tests

```
pip install .[test]
pytest
```