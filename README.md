# cfsolve

Solutions to a set of short competitive-programming problems, written as
ordinary Python functions that take values and return answers. Invalid
input that has no answer (an empty list where one is needed, mismatched
lengths and the like) raises `ValueError`.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using the library

The solvers are grouped by problem level:

- `cfsolve.helpers`: small number utilities: `is_prime`,
  `is_power_of_two`, `is_perfect_square`, `gcd`, `lcm`, `num_digits`,
  `set_bits` (bits of a 64-bit word), `dec_to_binary` and
  `binary_to_decimal`.
- `cfsolve.div_a`: `cheap_travel`, `easy_problem`, `football_winner`,
  `combination_lock`, `line_trip`, `square_area`, `string_task`,
  `caps_lock`.
- `cfsolve.div_b`: `arranging_cats`, `average_sleep_time`, `bad_boy`,
  `hamster_farm`, `kevin_permutation`, `normal_problem`,
  `preparing_contest`.
- `cfsolve.div_c`: `adjust_presentation`, `sum_closure`, `true_battle`,
  `andrew_stones` (returns `None` when impossible), `another_permutation`,
  `assemble_remainders`, `basil_garden`, `board_moves`, `hard_problem`,
  `kevin_binary_strings`, `sending_messages`, `chef_stocks` and the
  `RegistrationSystem` class.
- `cfsolve.div_d`: `manhattan_circle`, `mathematical_problem`,
  `permutation_game`, `is_binary_decimal`, `is_product_of_binary_decimals`,
  `unnatural_language`, `very_different_array`, `vlad_division`,
  `yarik_notes`.
- `cfsolve.div_efg`: `two_letter_strings`, `block_sequence`,
  `aquarium_height`, `negatives_positives`, `romantic_glasses`,
  `pictures_with_kittens` (returns `-1` when impossible), `three_sum`,
  `forever_winter`, `teleporters`.

Example:

    from cfsolve.div_a import cheap_travel
    from cfsolve.div_c import RegistrationSystem

    cheap_travel(6, 2, 1, 2)      # 6

    registry = RegistrationSystem()
    registry.register("first")    # "OK"
    registry.register("first")    # "first1"
    registry.register("first")    # "first2"

## Command line

The `cfsolve` command takes the name of a problem, reads that problem's
input from standard input as whitespace-separated tokens, and prints one
answer per line:

    cfsolve --help
    cfsolve registration < requests.txt

The problems it accepts:

- `registration`: a count `n`, then `n` names; prints `OK` for each new
  name, otherwise the name followed by the next free number.
- `easy-problem`: a count `t`, then `t` integers; prints for each the
  number of ordered pairs of numbers from 1 to 100 with that sum.
- `kevin-permutation`: a count `t`, then `t` pairs `n k`; prints each
  permutation with every value followed by a space.
- `yarik-notes`: a count `t`, then for each case a length `n` and `n`
  integers; prints the number of matching note pairs.

Truncated or malformed input makes the command print a message starting
with `cfsolve:` to standard error and exit with status 1; otherwise it
exits with status 0.

## What the command does not do

Only the four problems above can be run from the command line. Every other
solver is available only as a library function, to be called from Python
with the input already parsed.