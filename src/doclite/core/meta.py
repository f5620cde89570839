from doclite.core.expression import MetaExpression


class Meta:
    """Reserved document properties usable in expressions."""

    id = MetaExpression("_id", "id")
    sequence = MetaExpression("_sequence", "sequence")
    deleted = MetaExpression("_deleted", "deleted")
    expiration = MetaExpression("_expiration", "expiration")
