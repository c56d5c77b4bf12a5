STORAGE_KEY = "htmxrazor_cart"

# DOM anchors the cart keeps in sync
CART_ROOT_ID = "cart-root"
CART_COUNT_ID = "cart-count"
CONTENT_ID = "content"

AFTER_SWAP_EVENT = "htmx:afterSwap"

EMPTY_CART_MESSAGE = "Votre panier est vide."
CHECKOUT_MESSAGE = "Passage à la caisse simulé."

PRODUCTS_ERROR_HTML = "<p>Error loading products</p>"
PRODUCT_NOT_FOUND_HTML = "<p>Product not found</p>"
