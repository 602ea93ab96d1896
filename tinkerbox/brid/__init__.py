"""Parsing, validation and check-digit calculation for CPF and CNPJ numbers."""