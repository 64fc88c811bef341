""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "DEALS_FROM_CACHE"          :   "Deals loaded from cache.",
    "DEALS_FROM_API"            :   "Deals loaded from API."
}


# ERROR MESSAGES
ERROR = {
    # Deal Errors
    "DEALS_FETCH_FAILED"        :   "Failed to fetch deals",
    "DEAL_CREATE_FAILED"        :   "Failed to create deal",
    "INVALID_REQUEST"           :   "Request body must be a JSON object",

    # Catalog Errors
    "MALFORMED_DEAL_ID"         :   "Malformed deal id '{deal_id}': expected 'season#episode#company'.",
    "INVALID_PAGE_SIZE"         :   "Page size must be a positive integer, got {page_size}.",
    "PAGE_OUT_OF_RANGE"         :   "Page {page} is out of range (1-{total_pages}).",
    "INVALID_SORT_FIELD"        :   "Cannot sort by unknown field '{field}'.",
}
