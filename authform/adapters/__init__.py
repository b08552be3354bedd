"""Adapter package for the auth API boundary.

Purpose:
    Define the exception types raised by the auth transport and wallet
    integrations, and turn raw HTTP error bodies into domain error items.

Dependencies:
    ``requests`` response objects and ``authform.domain`` value objects.

Call context:
    Imported by the transport code that talks to the auth API (to raise
    ``ApiResponseError``) and by ``authform.usecases`` for classification.
"""
