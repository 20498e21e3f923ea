from aws_cdk import aws_lambda as _lambda

PYTHON_RUNTIME = _lambda.Runtime.PYTHON_3_12
DEFAULT_ARCHITECTURE = _lambda.Architecture.X86_64

DEFAULT_ENV = "dev"
DEPLOY_ENVS = ("dev", "staging", "prod")
DEFAULT_REGION = "eu-west-1"
SERVICE_NAME = "cloud-stacks"
PROJECT_TAG = "cloud-stacks"

# Environment variables read by DeploymentSettings
ENV_ACCOUNT = "CDK_DEFAULT_ACCOUNT"
ENV_DEPLOY_ENV = "DEPLOY_ENV"
ENV_PUBLIC_KEY_PATH = "EC2_PUBLIC_KEY_PATH"

ANY_IPV4_CIDR = "0.0.0.0/0"
VPC_CIDR = "10.0.0.0/16"

# Web stack (demodemo)
WEB_STACK_ID = "demodemo"
WEB_VPC_NAME = "DemoDemoVPC"
WEB_IGW_NAME = "DemoDemoVPCIGW"
WEB_NAT_NAME = "DemoDemoVPCNAT"
WEB_PUBLIC_SUBNET_NAME = "DemoDemoVPCPublic"
WEB_PUBLIC_SUBNET_2_NAME = "DemoDemoVPCPublic2"
WEB_PRIVATE_SUBNET_NAME = "DemoDemoVPCPrivate"
WEB_PRIVATE_RT_NAME = "DemoDemoVPCPrivateRT"
WEB_PUBLIC_RT_NAME = "DemoDemoVPCPublicRT"
WEB_PUBLIC_SUBNET_CIDR = "10.0.10.0/24"
WEB_PUBLIC_SUBNET_2_CIDR = "10.0.20.0/24"
WEB_PRIVATE_SUBNET_CIDR = "10.0.11.0/24"
WEB_PUBLIC_SUBNET_AZ = "eu-west-1a"
WEB_PUBLIC_SUBNET_2_AZ = "eu-west-1b"
WEB_S3_ENDPOINT_SERVICE = "com.amazonaws.{region}.s3"
ALB_SG_NAME = "ALBSG"
ALB_SG_DESCRIPTION = "DemoVPCALBSG"
ALB_NAME = "DemoAlb"
HTTPS_PORT = 443

# VPC + EC2 stack
VPC_EC2_STACK_ID = "vpc-ec2-example"
TRADING_HUB_NAME = "vpc-ec2-trading-hub"
TRADING_HUB_KEY_NAME = "vpc-ec2-trading-hub-key"
TRADING_HUB_SUBNET_CIDR = "10.0.10.0/24"
TRADING_HUB_AZ = "eu-west-1a"
TRADING_HUB_PRIVATE_IP = "10.0.10.100"
TRADING_HUB_INSTANCE_TYPE = "t3.micro"
TRADING_HUB_AMI_PARAMETER = "/aws/service/ami-amazon-linux-latest/amzn2-ami-hvm-x86_64-gp2"

# Lambda stacks
LAMBDA_SERVICE_NAME = "lambda-example"
LAMBDA_HANDLER = "index.handler"
LAMBDA_TABLE_NAME = "dyndb123"
LAMBDA_BASIC_EXECUTION_POLICY = "service-role/AWSLambdaBasicExecutionRole"
LAMBDA_PRINCIPAL = "lambda.amazonaws.com"
