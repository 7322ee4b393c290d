"""
Ledger service: net balance aggregation and settlement planning.

Both steps are pure functions of the trip's participants, expenses and
recorded settlements. Nothing here touches the database.
"""
from typing import Dict, Iterable, List
from decimal import Decimal, ROUND_HALF_UP
from app.schemas.balance import (
    Balance,
    LedgerExpense,
    LedgerParticipant,
    LedgerSettlement,
    ParticipantRef,
    Transaction,
)

CENT = Decimal("0.01")
# Half a cent: anything smaller is treated as settled
EPSILON = Decimal("0.005")


def round_money(value) -> Decimal:
    """Round an amount to 2 decimal places, half up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


class _Party:
    """A creditor or debtor with the amount still to be matched."""
    def __init__(self, balance: Balance, remaining: Decimal):
        self.ref = ParticipantRef(id=balance.participant_id, name=balance.name)
        self.remaining = remaining


def compute_balances(
    participants: Iterable[LedgerParticipant],
    expenses: Iterable[LedgerExpense],
    settlements: Iterable[LedgerSettlement],
) -> List[Balance]:
    """
    Compute one net balance per participant, in input order.

    The payer of an expense is credited its full amount and every split
    participant is debited their share. A settlement credits the payer
    (``from_id``) and debits the receiver (``to_id``). Ids that are not in
    ``participants`` are ignored.
    """
    participants = list(participants)
    net_balances: Dict[str, Decimal] = {p.id: Decimal(0) for p in participants}

    for expense in expenses:
        payer_id = expense.paid_by_participant_id
        if payer_id in net_balances:
            net_balances[payer_id] += expense.amount

        # Splits are debited even when the expense has no payer
        for split in expense.splits:
            if split.participant_id in net_balances:
                net_balances[split.participant_id] -= split.amount

    for settlement in settlements:
        if settlement.from_id in net_balances:
            net_balances[settlement.from_id] += settlement.amount
        if settlement.to_id in net_balances:
            net_balances[settlement.to_id] -= settlement.amount

    return [
        Balance(participant_id=p.id, name=p.name, net=round_money(net_balances[p.id]))
        for p in participants
    ]


def plan_transactions(balances: Iterable[Balance]) -> List[Transaction]:
    """
    Plan payments that bring every balance to zero.
    Uses a greedy largest-first matching of debtors against creditors.
    """
    balances = list(balances)
    creditors = [_Party(b, b.net) for b in balances if b.net > EPSILON]
    debtors = [_Party(b, -b.net) for b in balances if b.net < -EPSILON]

    # Stable sort: equal amounts keep input order
    creditors.sort(key=lambda party: party.remaining, reverse=True)
    debtors.sort(key=lambda party: party.remaining, reverse=True)

    transactions = []
    cred_idx = 0
    debt_idx = 0

    while cred_idx < len(creditors) and debt_idx < len(debtors):
        creditor = creditors[cred_idx]
        debtor = debtors[debt_idx]

        settle = min(creditor.remaining, debtor.remaining)
        rounded = round_money(settle)
        if rounded > 0:
            transactions.append(Transaction(
                from_participant=debtor.ref,
                to_participant=creditor.ref,
                amount=rounded
            ))

        # Subtract the unrounded amount so rounding error does not accumulate
        creditor.remaining -= settle
        debtor.remaining -= settle

        if creditor.remaining < EPSILON:
            cred_idx += 1
        if debtor.remaining < EPSILON:
            debt_idx += 1

    return transactions


def summarize_plan(
    balances: List[Balance],
    transactions: List[Transaction],
    currency: str = "USD"
) -> str:
    """Render balances and planned transfers as human-readable text."""
    summary_lines = [f"Participants: {len(balances)}", "", "Net balances:"]
    for balance in balances:
        summary_lines.append(f"  {balance.name}: {balance.net:+.2f} {currency}")
    summary_lines.append("")
    summary_lines.append("Transfers:")
    if not transactions:
        summary_lines.append("  (all settled)")
    for transaction in transactions:
        summary_lines.append(
            f"  {transaction.from_participant.name} -> {transaction.to_participant.name}: "
            f"{transaction.amount:.2f} {currency}"
        )
    return "\n".join(summary_lines)
