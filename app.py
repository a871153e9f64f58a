# ShopHub - local development server
# Expects the product/order service on :3000 and the customer service on :3001
# (override with PRODUCT_SERVICE_URL / CUSTOMER_SERVICE_URL)

import os
from shophub import create_app

app = create_app()


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
