PRODUCT_FIELDS = """
    id
    title
    metafields(first: 250) {
      edges {
        node {
          namespace
          key
          value
          type
          description
        }
      }
    }
    images(first: 10) {
      edges {
        node {
          id
          url
          altText
        }
      }
    }
    options {
      id
      name
      values
    }
"""

CREATE_PRODUCT_MUTATION = """
mutation createProduct($input: ProductInput!) {
  productCreate(input: $input) {
    product {%s}
    userErrors {
      field
      message
    }
  }
}
""" % PRODUCT_FIELDS

GET_PRODUCT_QUERY = """
query getProduct($id: ID!) {
  product(id: $id) {%s}
}
""" % PRODUCT_FIELDS

UPDATE_PRODUCT_MUTATION = """
mutation updateProduct($input: ProductInput!) {
  productUpdate(input: $input) {
    product {%s}
    userErrors {
      field
      message
    }
  }
}
""" % PRODUCT_FIELDS

DELETE_PRODUCT_MUTATION = """
mutation deleteProduct($input: ProductDeleteInput!) {
  productDelete(input: $input) {
    deletedProductId
    userErrors {
      field
      message
    }
  }
}
"""
