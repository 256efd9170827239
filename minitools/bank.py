"""Bank deposits: short-term, long-term and interest-free accounts for users."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import islice

NOT_ENOUGH_MONEY = "Not enough money"
INVALID_SHORT_TERM = "Invalid short-term deposit"
OK = "OK"

COMMAND_ARITY = {
    "create_short_term_deposit": 3,
    "create_long_term_deposit": 5,
    "create_gharzolhasane_deposit": 3,
    "past_time": 1,
    "inventory_report": 3,
    "calc_money_in_bank": 2,
    "calc_all_money": 1,
}
_ACKNOWLEDGED = {"create_long_term_deposit", "create_gharzolhasane_deposit", "past_time"}

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class BankError(Exception):
    """A request the bank refuses."""


def _to_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer {text!r}")
    return int(match.group(1))


def _to_float(text: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number {text!r}")
    return float(match.group(1))


def _truncate_cents(value: float) -> float:
    """Drop everything after the second decimal place."""
    return int(value * 100) / 100


def _format_amount(value: float) -> str:
    return f"{value:g}"


@dataclass
class ShortTermDeposit:
    id: int
    amount: float
    profit: float = 0.0

    @property
    def balance(self) -> float:
        return self.amount + self.profit


@dataclass
class LongTermDeposit:
    amount: float
    short_id: int
    years: int


@dataclass
class GharzDeposit:
    """An interest-free deposit."""

    amount: float


@dataclass
class BankAccount:
    """A bank's terms together with the deposits one user holds there."""

    id: int
    profit_margin: int
    minimum_investment: float
    short_deposits: list[ShortTermDeposit] = field(default_factory=list)
    long_deposits: list[LongTermDeposit] = field(default_factory=list)
    gharz_deposits: list[GharzDeposit] = field(default_factory=list)

    def find_short_deposit(self, short_id: int) -> ShortTermDeposit | None:
        return next((d for d in self.short_deposits if d.id == short_id), None)

    def opened(self) -> BankAccount:
        """A new, empty account on the same terms."""
        return BankAccount(self.id, self.profit_margin, self.minimum_investment)

    @property
    def total(self) -> float:
        return (
            sum(d.balance for d in self.short_deposits)
            + sum(d.amount for d in self.long_deposits)
            + sum(d.amount for d in self.gharz_deposits)
        )


@dataclass
class User:
    id: int
    wallet: float
    accounts: dict[int, BankAccount] = field(default_factory=dict)


def _check_funds(user: User, account: BankAccount, amount: float) -> None:
    if amount > user.wallet or amount < account.minimum_investment:
        raise BankError(NOT_ENOUGH_MONEY)


class Manager:
    """Keeps the users, the banks and the short-term deposit numbering."""

    def __init__(self, banks: Iterable[BankAccount], users: Iterable[User]) -> None:
        self.banks: dict[int, BankAccount] = {}
        for bank in banks:
            self.banks.setdefault(bank.id, bank)
        self.users: dict[int, User] = {}
        for user in users:
            self.users.setdefault(user.id, user)
        self._short_counts = {bank_id: 0 for bank_id in self.banks}

    def _user(self, user_id: int) -> User:
        try:
            return self.users[user_id]
        except KeyError:
            raise BankError(f"Unknown user {user_id}") from None

    def _bank(self, bank_id: int) -> BankAccount:
        try:
            return self.banks[bank_id]
        except KeyError:
            raise BankError(f"Unknown bank {bank_id}") from None

    def _next_short_id(self, bank_id: int) -> int:
        self._short_counts[bank_id] += 1
        return self._short_counts[bank_id]

    def _account_for(self, user: User, bank_id: int, amount: float) -> BankAccount:
        """The user's account at the bank, opened if funds allow."""
        account = user.accounts.get(bank_id)
        if account is not None:
            _check_funds(user, account, amount)
            return account
        template = self._bank(bank_id)
        _check_funds(user, template, amount)
        account = template.opened()
        user.accounts[bank_id] = account
        return account

    def create_short_term_deposit(self, user_id: int, bank_id: int, amount: float) -> int:
        """Open a short-term deposit and return its number within the bank."""
        user = self._user(user_id)
        account = self._account_for(user, bank_id, amount)
        deposit = ShortTermDeposit(self._next_short_id(bank_id), amount)
        account.short_deposits.append(deposit)
        user.wallet -= amount
        return deposit.id

    def create_long_term_deposit(
        self, user_id: int, bank_id: int, short_id: int, years: int, amount: float
    ) -> None:
        """Open a long-term deposit paying into an existing short-term one."""
        user = self._user(user_id)
        account = user.accounts.get(bank_id)
        if account is None or account.find_short_deposit(short_id) is None:
            raise BankError(INVALID_SHORT_TERM)
        _check_funds(user, account, amount)
        account.long_deposits.append(LongTermDeposit(amount, short_id, years))
        user.wallet -= amount

    def create_gharzolhasane_deposit(self, user_id: int, bank_id: int, amount: float) -> None:
        """Open an interest-free deposit."""
        user = self._user(user_id)
        account = self._account_for(user, bank_id, amount)
        account.gharz_deposits.append(GharzDeposit(amount))
        user.wallet -= amount

    def past_time(self, months: int) -> None:
        """Credit the profit of ``months`` months to every short-term deposit."""
        for user in self.users.values():
            for account in user.accounts.values():
                margin = account.profit_margin
                for short in account.short_deposits:
                    short.profit += months * margin * short.amount / 100
                for long in account.long_deposits:
                    target = account.find_short_deposit(long.short_id)
                    if target is not None:
                        target.profit += months * long.years * margin * long.amount / 100

    def inventory_report(self, user_id: int, bank_id: int, short_id: int) -> float:
        """Balance of one short-term deposit, truncated to cents."""
        user = self.users.get(user_id)
        account = user.accounts.get(bank_id) if user is not None else None
        deposit = account.find_short_deposit(short_id) if account is not None else None
        if deposit is None:
            raise BankError(INVALID_SHORT_TERM)
        return _truncate_cents(deposit.balance)

    def money_in_bank(self, user_id: int, bank_id: int) -> float:
        """Everything a user holds at one bank, truncated to cents."""
        user = self.users.get(user_id)
        account = user.accounts.get(bank_id) if user is not None else None
        return _truncate_cents(account.total if account is not None else 0.0)

    def all_money(self, user_id: int) -> float:
        """Everything a user holds at all banks, truncated to cents."""
        user = self.users.get(user_id)
        total = sum(a.total for a in user.accounts.values()) if user is not None else 0.0
        return _truncate_cents(total)

    def execute(self, command: str, args: Sequence[str]) -> list[str]:
        """Run one textual command and return the lines it prints.

        Unknown commands print nothing. As in the command interpreter
        this mirrors, ``create_gharzolhasane_deposit`` opens a short-term
        deposit, and acknowledged commands print ``OK`` even after an error.
        """
        arity = COMMAND_ARITY.get(command)
        if arity is None:
            return []
        if len(args) != arity:
            raise ValueError(f"{command} takes {arity} arguments")
        output: list[str] = []
        try:
            if command in ("create_short_term_deposit", "create_gharzolhasane_deposit"):
                short_id = self.create_short_term_deposit(
                    int(args[0]), int(args[1]), float(args[2])
                )
                output.append(str(short_id))
            elif command == "create_long_term_deposit":
                self.create_long_term_deposit(
                    int(args[0]), int(args[1]), int(args[2]), int(args[3]), float(args[4])
                )
            elif command == "past_time":
                self.past_time(int(args[0]))
            elif command == "inventory_report":
                value = self.inventory_report(int(args[0]), int(args[1]), int(args[2]))
                output.append(_format_amount(value))
            elif command == "calc_money_in_bank":
                output.append(_format_amount(self.money_in_bank(int(args[0]), int(args[1]))))
            else:
                output.append(_format_amount(self.all_money(int(args[0]))))
        except BankError as error:
            output.append(str(error))
        if command in _ACKNOWLEDGED:
            output.append(OK)
        return output


def _data_lines(path: str | os.PathLike) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().split("\n")
    except OSError:
        return []
    if lines and lines[-1] == "":
        lines.pop()
    return lines[1:]


def read_users(path: str | os.PathLike) -> list[User]:
    """Read ``id,wallet`` rows after a header line; a missing file gives none."""
    users = []
    for line in _data_lines(path):
        parts = line.split(",")
        users.append(User(_to_int(parts[0]), _to_float(parts[1] if len(parts) > 1 else "")))
    return users


def read_banks(path: str | os.PathLike) -> list[BankAccount]:
    """Read ``id,margin,minimum`` rows after a header line; a missing file gives none."""
    banks = []
    for line in _data_lines(path):
        parts = (line.split(",") + ["", ""])[:3]
        banks.append(BankAccount(_to_int(parts[0]), _to_int(parts[1]), _to_float(parts[2])))
    return banks


def main(argv: Sequence[str] | None = None) -> int:
    """Load ``-b`` banks and ``-u`` users, then run commands from standard input."""
    if argv is None:
        argv = sys.argv[1:]
    paths = {"-b": "", "-u": ""}
    arguments = iter(argv)
    for arg in arguments:
        if arg in paths:
            value = next(arguments, None)
            if value is None:
                print(f"{arg} option requires one argument.", file=sys.stderr)
                return 1
            paths[arg] = value
    try:
        manager = Manager(read_banks(paths["-b"]), read_users(paths["-u"]))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    tokens = iter(sys.stdin.read().split())
    for command in tokens:
        args = list(islice(tokens, COMMAND_ARITY.get(command, 0)))
        try:
            lines = manager.execute(command, args)
        except ValueError:
            break
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())