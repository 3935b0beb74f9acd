"""
esimqa partner API tests.

Test Modules:
    - test_order_submission: POST orders, positive and validation cases
    - test_esim_list: GET sims, include/limit/page/filter parameters

Running Tests:
    ESIMQA_API_CLIENT_ID=... ESIMQA_API_CLIENT_SECRET=... pytest tests/api/ --live
"""
