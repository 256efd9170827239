# minitools

A set of small, independent command-line tools and the Python modules behind
them. Everything uses the standard library only.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tools

### `metro-trip`: metro trip planner

Reads a whitespace-separated network description from standard input:

1. the number of lines and the start time (`H:MM`);
2. for each line, its name and its train interval in minutes, then the
   stations towards the start of the line and the stations towards its end,
   each given as a count followed by `ride-time name` pairs;
3. the name of the destination station.

Trains run from 06:00, one every interval. The tool prints three lines: the
direction, line and number of stations passed, the arrival time as
`hour:minute` (minutes are not zero-padded), and the fare,
`ceil(1000 * log10(10 * stations))`. If no line serves the destination, or
the input ends early, it prints an error to standard error and exits with
status 1.

```
metro-trip < network.txt
```

From Python: `minitools.metro.parse_network(text)` returns the lines, the
start time and the destination; `plan_trip(lines, start_time, destination)`
returns a `TripPlan`; `format_plan(plan)` renders it. `parse_time`,
`arrival_time_of_train` and `trip_cost` are also available.

### `letter-palindrome`: palindrome check that ignores non-letters

Reads lines from standard input and prints `true` or `false` for each one,
comparing only ASCII letters and treating upper and lower case alike.

```
echo "A man, a plan, a canal: Panama" | letter-palindrome
```

From Python: `minitools.palindrome.is_letter_palindrome(text)`.

### `find-operators`: fill in the operators

Reads a count `n`, then `n - 1` numbers and a target. It searches for `+`,
`-` and `*` between the numbers (tried in that order) so that the expression,
evaluated strictly left to right, reaches the target. It prints the equation,
for example `1+2*3=9`, without a trailing newline, or `No Solution!`.

```
find-operators < puzzle.txt
```

From Python: `minitools.operators.find_operators(numbers, target)` returns the
list of operators or `None`; `format_solution(numbers, operators, target)`
renders the equation.

### `clinic-schedule`: assign patients to doctors

Reads `patients.csv` (`name,problem,visit_time`, with a header row),
`doctors.csv` (`name,specialty,cost,visit_duration,avg_waiting_time,days`,
with a header row, days written as `Day-from-to` separated by `$`) and
`diseases.csv` (`specialty,problem$problem`, no header row) from the current
directory. A missing file counts as empty.

Each patient's problem is matched to a specialty. Patients are booked in order
of their requested visit time, each with the doctor of that specialty whose
next free visit is earliest; ties are broken by lower charge, shorter average
wait, then name. The output has one block per patient in name order, separated
by `----------`, showing the doctor, the visit (weekday, visit number on that
day, start time) and the charge, or `No free time`.

```
clinic-schedule
```

From Python: `minitools.clinic.read_patients`, `read_doctors`,
`read_diseases`, `assign_visits(patients, diseases, doctors)` (books in
place) and `format_report(patients)`. `parse_minutes` and `format_time`
convert between `H` or `H:MM` and minutes since midnight.

### `bank-deposits`: deposit manager

Loads banks with `-b` (`id,profit_margin,minimum_investment`) and users with
`-u` (`id,wallet`); both are CSV files with a header row, and a missing file
gives no entries. Commands are then read from standard input:

- `create_short_term_deposit <user> <bank> <amount>`: prints the new deposit's
  number within the bank
- `create_long_term_deposit <user> <bank> <short_id> <years> <amount>`
- `create_gharzolhasane_deposit <user> <bank> <amount>`: as a command, this
  opens a short-term deposit and prints its number
- `past_time <months>`: credits monthly profit to every short-term deposit,
  including the profit of the long-term deposits that pay into it
- `inventory_report <user> <bank> <short_id>`
- `calc_money_in_bank <user> <bank>`
- `calc_all_money <user>`

Amounts are truncated to cents. Refused requests print `Not enough money` or
`Invalid short-term deposit`. The long-term, interest-free and `past_time`
commands print `OK` afterwards, even after an error. Unknown commands print
nothing; input that ends in the middle of a command stops processing.

```
bank-deposits -b banks.csv -u users.csv < commands.txt
```

From Python: `minitools.bank.Manager`, built from `read_banks` and
`read_users`. Its methods `create_short_term_deposit`,
`create_long_term_deposit`, `create_gharzolhasane_deposit` (which does open an
interest-free deposit), `past_time`, `inventory_report`, `money_in_bank` and
`all_money` raise `BankError` when a request is refused. `execute(command,
args)` runs one textual command and returns the lines it prints.

### `image-editor`: 24-bit BMP filters

Filters are given as options and applied in order: `-B` Gaussian blur,
`-S` sharpen, `-E` emboss, `-I` invert, `-G` grayscale. An argument of the form
`x:y:w:h` right after a filter limits that filter to the given rectangle, which
the filter then treats as an image of its own. Pairs of input and output file
names are read from standard input, one pair per line; lines with fewer than
two names are skipped.

```
echo "photo.bmp out.bmp" | image-editor -G -B 10:10:50:40
```

From Python:

```python
from minitools.bmp import Bmp
from minitools.filters import GaussianBlur, Invert

image = Bmp.read("photo.bmp")
Invert().apply(image)
GaussianBlur().apply_with_view(image, 0, 0, 32, 32)
image.write("out.bmp")
```

`Bmp.create(width, height)` makes a black image; `Bmp.from_bytes` and
`to_bytes` work in memory. `image.pixels` is a list of rows of `Pixel(red,
green, blue)`, top row first. Writing keeps every non-pixel byte of the file
that was read. `minitools.filters.KernelFilter(kernel)` applies any 3x3
kernel, and `convolve_pixel` computes a single output pixel.
`minitools.imageeditor` offers `parse_arguments`, `read_file_names` and
`process_files` for building the same pipeline in code.

Reading a file that is not a BMP raises `InvalidFileError`; a BMP that is not
uncompressed 24-bit raises `UnsupportedBmpError`. Both derive from `BmpError`.

## Limitations

- `image-editor` reads and writes only uncompressed 24-bit BMP files with
  bottom-up rows; it does not handle other image formats or bit depths.
- File names given on the `image-editor` command line are checked for pairing
  but not processed; only the pairs on standard input are edited.
- `clinic-schedule` always reads its three CSV files from the current
  directory; it has no options for other paths.
- The tools keep no state between runs; the bank manager holds its deposits
  in memory only.