"""
Static demo data for the invoice filters package.

Modules:
- demo_invoices: Invoice scenarios served by DemoInvoiceService
"""
