"""Repository layer for CRM junction (link) tables.

base: JunctionTable / JunctionStore, the shared composite-key soft-delete
      engine with its logging wrapper.

One module per link table, each exposing a configured `store` plus named
helpers (get_by_<a>_id, exists_by_<a>_and_<b>, add_relationship,
remove_relationship, remove_all_for_<a>, delete_by_<a>_id, ...):
- company_*: activity, address, attachment, email_address, invoice, note,
             payment, person, phone, quote, sales_order
- person_*: activity, address, attachment, email_address, note, phone,
            sales_order
- invoice_*: activity, invoice_line_item, note
- payment_*: activity, payment_line_item
- quote_*: activity, quote_line_item
- sales_order_*: activity, note, sales_order_line_item
"""
