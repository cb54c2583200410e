"""Scientific name rendering.

The names layer turns an atomised `TaxonName` record into formatted scientific name strings
(canonical, canonical with markers, complete canonical and full name).
"""
