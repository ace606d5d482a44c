from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()


def cart_table(name: str = "cart", meta: MetaData = metadata) -> Table:
    """Table with stored carts. The name comes from settings, so the table is
    declared lazily and reused once registered in `meta`"""
    if name in meta.tables:
        return meta.tables[name]

    return Table(
        name,
        meta,
        Column("identifier", String(255), primary_key=True),
        Column("instance", String(255), primary_key=True),
        Column("content", Text, nullable=False),
        Column("created_at", DateTime, nullable=True),
        Column("updated_at", DateTime, nullable=True),
    )
